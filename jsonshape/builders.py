"""Builders for JSON schema descriptors.

Every builder returns a plain, JSON-serializable dict. None of them check
their arguments: `array_type_of_length(-1)` is accepted and simply never
matches anything.
"""
import re
from typing import Any, Iterable, List, Optional


def strict_object(properties: dict, optional_props: Optional[Iterable[str]] = None) -> dict:
    """Object with exactly these properties; additional properties are not allowed.

    Every property is required unless it is listed in `optional_props`.
    Example: `strict_object({"id": number_type, "name": string_type})`
    """
    return {
        "type": "object",
        "properties": dict(properties),
        "additionalProperties": False,
        "required": _required_keys(properties, optional_props),
    }


def object_with_required_props(properties: dict, optional_props: Optional[Iterable[str]] = None) -> dict:
    """Object with at least these properties; additional properties are allowed."""
    return {
        "type": "object",
        "properties": dict(properties),
        "additionalProperties": True,
        "required": _required_keys(properties, optional_props),
    }


def _required_keys(properties: dict, optional_props: Optional[Iterable[str]]) -> List[str]:
    optional = set(optional_props or ())
    return [name for name in properties if name not in optional]


def array_of_items(item_schema: dict, min_items: int = 1) -> dict:
    """Apply `item_schema` to every element. Empty arrays fail unless `min_items=0`."""
    return {
        "type": "array",
        "items": item_schema,
        "minItems": min_items,
    }


object_type = {"type": "object"}

# empty strings are rejected; use string_type_can_be_empty for those
string_type = {"type": "string", "minLength": 1}

string_type_can_be_empty = {"type": "string"}


def string_type_matching(pattern: str) -> dict:
    """Non-empty string matching the regular expression `pattern` (searched, not fully matched)."""
    return {
        "type": "string",
        "minLength": 1,
        "pattern": pattern,
    }


# loose on purpose: scheme plus a few characters, not a URL grammar
url_type = string_type_matching("^http(s)?://.+..+")

date_time = {"type": "string", "format": "date-time"}

uuid_type = {"type": "string", "format": "uuid"}


def string_type_exact(expected: str) -> dict:
    """String equal to `expected`. Regex metacharacters in `expected` are escaped."""
    return {
        "type": "string",
        # (?!\n) stops $ from also matching before a trailing newline
        "pattern": f"^{re.escape(expected)}(?!\\n)$",
    }


string_type_path = {"type": "string", "pattern": "^(.+)/(.+)$"}

# minLength only applies when the value is a string
string_type_or_null = {"type": ["string", "null"], "minLength": 1}

number_type = {"type": "number"}


def number_type_greater_than(minimum: float) -> dict:
    """Number no smaller than `minimum` (the bound is inclusive)."""
    return {"type": "number", "minimum": minimum}


def number_type_less_than(maximum: float) -> dict:
    """Number no larger than `maximum` (the bound is inclusive)."""
    return {"type": "number", "maximum": maximum}


null_type = {"type": "null"}

boolean_type = {"type": "boolean"}


def exactly(expected: Any) -> dict:
    """Value deeply equal to `expected`; objects and arrays work too."""
    return {"enum": [expected]}


def one_of(expected_values: Iterable[Any]) -> dict:
    return {"enum": list(expected_values)}


def any_of(schemas: Iterable[dict]) -> dict:
    """Value matching at least one of `schemas`, e.g. `any_of([string_type, number_type])`."""
    return {"anyOf": list(schemas)}


array_type = {"type": "array"}


def array_type_of_length(length: int) -> dict:
    return {
        "type": "array",
        "minItems": length,
        "maxItems": length,
    }


array_of_objects_type = {"type": "array", "items": {"type": "object"}}
