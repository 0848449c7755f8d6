"""Assertion entry point: check a value against a schema built with `jsonshape.builders`.

`setup()` registers the matcher once (usually from a conftest.py); after that
`expect_to_match_schema(value, schema)` can be called from any test.
"""
import logging
from typing import Any, Optional

from jsonshape.classify import throw_error_if_not_a_correct_json_schema
from jsonshape.config import load_config
from jsonshape.errors import SchemaMismatch
from jsonshape.matcher import JsonSchemaMatcher
from jsonshape.render import pretty_print_object

logger = logging.getLogger(__name__)

_registered_matcher: Optional[JsonSchemaMatcher] = None
_default_matcher: Optional[JsonSchemaMatcher] = None


def setup(matcher: Optional[JsonSchemaMatcher] = None, config: Optional[dict] = None) -> JsonSchemaMatcher:
    """Register the matcher used by `expect_to_match_schema`.

    Without arguments the matcher is built from `load_config()`, i.e. the
    file named by $JSONSHAPE_CONFIG plus env overrides.
    """
    global _registered_matcher
    if matcher is None:
        matcher = JsonSchemaMatcher.from_config(config if config is not None else load_config())
    _registered_matcher = matcher
    logger.debug("registered matcher %r", matcher)
    return matcher


def get_matcher() -> JsonSchemaMatcher:
    if _registered_matcher is not None:
        return _registered_matcher
    # not registered: share one matcher with default options, but leave the registry empty
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = JsonSchemaMatcher()
    return _default_matcher


def expect_to_match_schema(value: Any, schema: dict, matcher: Optional[JsonSchemaMatcher] = None) -> None:
    """Assert that `value` matches `schema`. Raise AssertionError otherwise.

    A `schema` that isn't recognisable as one raises NotASchemaError before
    anything is validated. On a mismatch the raised SchemaMismatch keeps the
    matcher's message and appends a rendering of `value`.
    """
    throw_error_if_not_a_correct_json_schema(schema)

    matcher = matcher or get_matcher()
    try:
        matcher.matches(value, schema)
    except SchemaMismatch as error:
        message = f"{error.message}\nSchema mismatch. Actual result:\n{pretty_print_object(value)}\n"
        raise SchemaMismatch(message, errors=error.errors) from None
