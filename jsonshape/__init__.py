from jsonshape.builders import (
    any_of,
    array_of_items,
    array_of_objects_type,
    array_type,
    array_type_of_length,
    boolean_type,
    date_time,
    exactly,
    null_type,
    number_type,
    number_type_greater_than,
    number_type_less_than,
    object_type,
    object_with_required_props,
    one_of,
    strict_object,
    string_type,
    string_type_can_be_empty,
    string_type_exact,
    string_type_matching,
    string_type_or_null,
    string_type_path,
    url_type,
    uuid_type,
)
from jsonshape.classify import is_json_schema, throw_error_if_not_a_correct_json_schema
from jsonshape.errors import ERROR_MSG_FOR_INCORRECT_SCHEMA, NotASchemaError, SchemaMismatch
from jsonshape.expect import expect_to_match_schema, setup
from jsonshape.matcher import JsonSchemaMatcher

__all__ = [
    "ERROR_MSG_FOR_INCORRECT_SCHEMA",
    "JsonSchemaMatcher",
    "NotASchemaError",
    "SchemaMismatch",
    "any_of",
    "array_of_items",
    "array_of_objects_type",
    "array_type",
    "array_type_of_length",
    "boolean_type",
    "date_time",
    "exactly",
    "expect_to_match_schema",
    "is_json_schema",
    "null_type",
    "number_type",
    "number_type_greater_than",
    "number_type_less_than",
    "object_type",
    "object_with_required_props",
    "one_of",
    "setup",
    "strict_object",
    "string_type",
    "string_type_can_be_empty",
    "string_type_exact",
    "string_type_matching",
    "string_type_or_null",
    "string_type_path",
    "throw_error_if_not_a_correct_json_schema",
    "url_type",
    "uuid_type",
]
