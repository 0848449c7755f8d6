"""JSON schema matcher used behind `expect_to_match_schema`.

`JsonSchemaMatcher.matches(instance, schema)` raises `SchemaMismatch` when
validation fails. Uses the `jsonschema` library.
"""
import logging
from typing import Any, Optional

from jsonschema import (
    Draft4Validator,
    Draft6Validator,
    Draft7Validator,
    Draft201909Validator,
    Draft202012Validator,
    FormatChecker,
)
from jsonschema.exceptions import SchemaError, best_match

from jsonshape.errors import SchemaMismatch

logger = logging.getLogger(__name__)

VALIDATORS = {
    "draft4": Draft4Validator,
    "draft6": Draft6Validator,
    "draft7": Draft7Validator,
    "draft201909": Draft201909Validator,
    "draft202012": Draft202012Validator,
}


def validator_for_draft(draft: str):
    try:
        return VALIDATORS[draft]
    except KeyError:
        raise ValueError(
            f"Unknown JSON schema draft {draft!r}; choose one of: {', '.join(VALIDATORS)}"
        ) from None


def format_error_path(error) -> str:
    return ".".join(str(p) for p in error.path) if error.path else "<root>"


class JsonSchemaMatcher:
    def __init__(self, all_errors: bool = True, draft: str = "draft7", check_formats: bool = True):
        self.all_errors = all_errors
        self.draft = draft
        self.validator_cls = validator_for_draft(draft)
        # date-time is only enforced when rfc3339-validator is importable
        self.format_checker = FormatChecker() if check_formats else None
        logger.debug(
            "matcher created: draft=%s all_errors=%s check_formats=%s",
            draft, all_errors, check_formats,
        )

    @classmethod
    def from_config(cls, cfg: Optional[dict] = None) -> "JsonSchemaMatcher":
        cfg = cfg or {}
        return cls(
            all_errors=cfg.get("all_errors", True),
            draft=cfg.get("draft", "draft7"),
            check_formats=cfg.get("check_formats", True),
        )

    def matches(self, instance: Any, schema: dict) -> None:
        """Validate `instance` against `schema`. Raise SchemaMismatch on failure.

        With `all_errors` every violation is listed, ordered by instance path;
        otherwise only the most relevant one is.
        """
        try:
            self.validator_cls.check_schema(schema)
        except SchemaError as e:
            raise SchemaMismatch(f"Invalid JSON schema: {e.message}") from e

        validator = self.validator_cls(schema, format_checker=self.format_checker)
        errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
        if not errors:
            return
        if not self.all_errors:
            errors = [best_match(errors)]
        parts = [f"{format_error_path(e)}: {e.message}" for e in errors]
        logger.debug("schema mismatch with %d error(s)", len(errors))
        raise SchemaMismatch("JSON schema validation errors: " + "; ".join(parts), errors=errors)
