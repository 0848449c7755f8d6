import pytest
from jsonschema import Draft7Validator, Draft202012Validator
from jsonshape import JsonSchemaMatcher, number_type, strict_object, string_type
from jsonshape.errors import SchemaMismatch
from jsonshape.matcher import validator_for_draft


def test_matches_returns_none_on_success(matcher):
    assert matcher.matches({"a": "x"}, strict_object({"a": string_type})) is None


def test_message_lists_errors_by_path(matcher):
    schema = strict_object({"a": string_type, "b": number_type})
    with pytest.raises(SchemaMismatch) as exc:
        matcher.matches({"b": "2", "a": 1}, schema)
    assert exc.value.message == (
        "JSON schema validation errors: "
        "a: 1 is not of type 'string'; b: '2' is not of type 'number'"
    )


def test_root_errors_use_root_marker(matcher):
    with pytest.raises(SchemaMismatch) as exc:
        matcher.matches({}, strict_object({"a": string_type}))
    assert "<root>: 'a' is a required property" in exc.value.message


def test_first_error_only():
    matcher = JsonSchemaMatcher(all_errors=False)
    with pytest.raises(SchemaMismatch) as exc:
        matcher.matches({"a": 1, "b": 2}, strict_object({"a": string_type, "b": string_type}))
    assert len(exc.value.errors) == 1
    assert "; " not in exc.value.message


def test_mixed_index_and_key_paths_sort_without_error(matcher):
    schema = {"type": "array", "items": strict_object({"a": string_type})}
    with pytest.raises(SchemaMismatch) as exc:
        matcher.matches([{"a": 1}, {"a": 2}], schema)
    assert exc.value.message.index("0.a:") < exc.value.message.index("1.a:")


def test_invalid_schema_is_reported(matcher):
    with pytest.raises(SchemaMismatch) as exc:
        matcher.matches(1, {"type": "number", "minimum": "zero"})
    assert exc.value.message.startswith("Invalid JSON schema: ")
    assert exc.value.errors == []


def test_from_config_defaults():
    matcher = JsonSchemaMatcher.from_config(None)
    assert matcher.all_errors is True
    assert matcher.validator_cls is Draft7Validator
    assert matcher.format_checker is not None


def test_from_config_values():
    matcher = JsonSchemaMatcher.from_config({"all_errors": False, "draft": "draft202012", "check_formats": False})
    assert matcher.all_errors is False
    assert matcher.validator_cls is Draft202012Validator
    assert matcher.format_checker is None


def test_unknown_draft_is_rejected():
    with pytest.raises(ValueError, match="draft2099"):
        validator_for_draft("draft2099")
    with pytest.raises(ValueError):
        JsonSchemaMatcher(draft="latest")


def test_schema_mismatch_is_an_assertion_error():
    assert issubclass(SchemaMismatch, AssertionError)
