from collections.abc import Mapping
from typing import Any

from jsonshape.errors import NotASchemaError


def is_json_schema(candidate: Any) -> bool:
    """Tell a schema apart from a plain object.

    A schema is a non-empty mapping whose `type` is a string. Nested
    `properties`/`items` and the `type` value itself are not checked here;
    the matcher rejects those when it runs.
    """
    if not isinstance(candidate, Mapping) or len(candidate) == 0:
        return False
    return isinstance(candidate.get("type"), str)


def throw_error_if_not_a_correct_json_schema(schema: Any) -> None:
    if not is_json_schema(schema):
        raise NotASchemaError()
