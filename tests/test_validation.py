"""Tests for formcore.validation — core and form validators."""

from typing import Any

import pytest

from formcore.config import ValidationConfig
from formcore.errors import SchemaValidationError
from formcore.schema import FieldSchema, Issue, ObjectSchema, as_number, as_string
from formcore.schema.rules import min_length, positive
from formcore.validation import (
    FieldError,
    FormValidationResult,
    ValidationResult,
    create_validator,
    parse_or_throw,
    safe_parse,
    validate_field,
    validate_form,
)

# ---------------------------------------------------------------------------
# Hand-written schemas
# ---------------------------------------------------------------------------


class Reporting:
    """Schema that always fails with the given issues."""

    def __init__(self, *issues: Issue) -> None:
        self.issues = issues

    def parse(self, raw: Any) -> Any:
        raise SchemaValidationError(self.issues)


class Exploding:
    """Schema that fails in a way the validators do not recognize."""

    def parse(self, raw: Any) -> Any:
        msg = "boom"
        raise RuntimeError(msg)


class Identity:
    """Schema without field lookup that accepts anything."""

    def parse(self, raw: Any) -> Any:
        return raw


class BrokenLookup(Identity):
    """Schema whose field lookup itself raises."""

    def field_schema(self, name: str) -> Any:
        raise LookupError(name)


@pytest.fixture
def profile() -> ObjectSchema:
    return ObjectSchema(
        {
            "name": FieldSchema(min_length(1, "Name is required"), coerce=as_string),
            "age": FieldSchema(positive.with_message("Age must be positive"), coerce=as_number),
        }
    )


# ---------------------------------------------------------------------------
# Core validator
# ---------------------------------------------------------------------------


class TestSafeParse:
    def test_success(self, profile: ObjectSchema) -> None:
        data = {"name": "Ana", "age": 30}
        result = safe_parse(profile, data)
        assert result.success is True
        assert result.data == profile.parse(data)
        assert result.errors is None
        assert result

    def test_failure_keys_are_dotted_paths(self, profile: ObjectSchema) -> None:
        result = safe_parse(profile, {"name": "", "age": -1})
        assert result.success is False
        assert result.data is None
        assert result.errors == {"name": "Name is required", "age": "Age must be positive"}
        assert not result

    def test_nested_path(self) -> None:
        result = safe_parse(Reporting(Issue(("items", 0, "sku"), "Required")), {})
        assert result.errors == {"items.0.sku": "Required"}

    def test_repeated_path_last_message_wins(self) -> None:
        schema = Reporting(
            Issue(("password",), "Too short"),
            Issue(("password",), "Needs a digit"),
        )
        assert safe_parse(schema, {}).errors == {"password": "Needs a digit"}

    def test_pathless_issue_uses_general_key(self) -> None:
        result = safe_parse(Reporting(Issue((), "Totals do not match")), {})
        assert result.errors == {"_general": "Totals do not match"}

    def test_unrecognized_failure(self) -> None:
        result = safe_parse(Exploding(), {})
        assert result.errors == {"_general": "Unknown validation error"}

    def test_structured_error_without_issues_is_unrecognized(self) -> None:
        result = safe_parse(Reporting(), {})
        assert result.errors == {"_general": "Unknown validation error"}

    def test_config_overrides_key_and_message(self) -> None:
        config = ValidationConfig(general_key="__all__", unknown_error_message="Oops")
        assert safe_parse(Exploding(), {}, config=config).errors == {"__all__": "Oops"}

    def test_never_raises_for_exceptions(self) -> None:
        class Failing:
            def parse(self, raw: Any) -> Any:
                raise KeyError(raw)

        assert safe_parse(Failing(), "x").success is False


class TestCreateValidator:
    def test_reusable(self, profile: ObjectSchema) -> None:
        check = create_validator(profile)
        assert check({"name": "Ana", "age": 1}).success
        assert not check({"name": "Ana", "age": 0}).success


class TestParseOrThrow:
    def test_returns_value(self, profile: ObjectSchema) -> None:
        assert parse_or_throw(profile, {"name": "Ana", "age": 30}) == {"name": "Ana", "age": 30}

    def test_reraises_schema_error_unchanged(self, profile: ObjectSchema) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_or_throw(profile, {"name": "", "age": 30})
        assert exc_info.value.errors == {"name": "Name is required"}

    def test_reraises_unrecognized_error(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            parse_or_throw(Exploding(), {})


class TestValidationResult:
    def test_fail_requires_errors(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult.fail({})

    def test_frozen(self) -> None:
        r = ValidationResult.ok(1)
        with pytest.raises(AttributeError):
            r.data = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Form validator
# ---------------------------------------------------------------------------


class TestValidateForm:
    def test_scenario_invalid(self, profile: ObjectSchema) -> None:
        result = validate_form(profile, {"name": "", "age": -1})
        assert result.is_valid is False
        assert result.data is None
        assert result.general_error is None
        assert set(result.field_errors or {}) == {"name", "age"}
        assert result.field_errors["name"] == FieldError("Name is required", "too_small")
        assert result.field_errors["age"].code == "too_small"

    def test_scenario_valid(self, profile: ObjectSchema) -> None:
        result = validate_form(profile, {"name": "Ana", "age": 30})
        assert result.is_valid is True
        assert result.data == {"name": "Ana", "age": 30}
        assert result.field_errors is None
        assert result.general_error is None

    def test_same_verdict_as_safe_parse(self, profile: ObjectSchema) -> None:
        for data in ({"name": "Ana", "age": 30}, {"name": "", "age": 30}, None, {"age": 1}):
            assert validate_form(profile, data).is_valid == safe_parse(profile, data).success

    def test_repeated_path_last_error_wins(self) -> None:
        schema = Reporting(Issue(("pin",), "Too short", "too_small"), Issue(("pin",), "Digits only", "invalid_string"))
        result = validate_form(schema, {})
        assert result.field_errors == {"pin": FieldError("Digits only", "invalid_string")}

    def test_unrecognized_failure_is_general(self) -> None:
        result = validate_form(Exploding(), {})
        assert result == FormValidationResult.general("Unknown validation error")
        assert result.field_errors is None

    def test_only_pathless_issues_is_general(self) -> None:
        result = validate_form(Reporting(Issue((), "Pick at least one option")), {})
        assert result.general_error == "Pick at least one option"
        assert result.field_errors is None

    def test_mixed_pathless_issue_goes_under_general_key(self) -> None:
        result = validate_form(Reporting(Issue(("a",), "bad a"), Issue((), "bad form")), {})
        assert result.field_errors == {"a": FieldError("bad a"), "_general": FieldError("bad form")}

    def test_errors_for_display(self) -> None:
        assert FormValidationResult.general("x").errors_for_display("_g") == {"_g": FieldError("x")}
        assert FormValidationResult.valid(1).errors_for_display("_g") == {}


class TestValidateField:
    def test_passing_value(self, profile: ObjectSchema) -> None:
        assert validate_field(profile, "age", 3) is None

    def test_first_error(self, profile: ObjectSchema) -> None:
        assert validate_field(profile, "age", -3) == FieldError("Age must be positive", "too_small")

    def test_value_checked_alone(self, profile: ObjectSchema) -> None:
        # The enclosing object would fail (name missing); the field alone passes
        assert validate_field(profile, "age", 3) is None
        assert validate_form(profile, {"age": 3}).is_valid is False

    def test_unknown_field_is_none(self, profile: ObjectSchema) -> None:
        for value in (None, "", -1, {"x": 1}):
            assert validate_field(profile, "email", value) is None

    def test_schema_without_field_lookup(self) -> None:
        assert validate_field(Identity(), "anything", "value") is None
        assert validate_field(Exploding(), "anything", "value") is None

    def test_failing_field_lookup(self) -> None:
        assert validate_field(BrokenLookup(), "email", "value") is None

    def test_idempotent(self, profile: ObjectSchema) -> None:
        first = validate_field(profile, "name", "")
        assert validate_field(profile, "name", "") == first

    def test_sub_schema_without_issues(self) -> None:
        schema = ObjectSchema({"x": Reporting()})
        assert validate_field(schema, "x", 1) == FieldError("Invalid field")

    def test_sub_schema_unrecognized_failure(self) -> None:
        schema = ObjectSchema({"x": Exploding()})
        assert validate_field(schema, "x", 1) == FieldError("Validation error")
