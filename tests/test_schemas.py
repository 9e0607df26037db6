"""Tests for formcore.schemas — ready-made field and user schemas."""

import datetime as dt

import pytest

from formcore.schemas import (
    cnpj_schema,
    cpf_schema,
    create_user_schema,
    date_schema,
    email_schema,
    future_date_schema,
    login_schema,
    non_empty_string_schema,
    password_schema,
    past_date_schema,
    phone_schema,
    positive_number_schema,
    update_user_schema,
    url_schema,
)
from formcore.validation import FieldError, safe_parse, validate_field, validate_form


class TestEmailSchema:
    def test_normalizes(self) -> None:
        assert email_schema.parse("Ana@Example.COM") == "ana@example.com"

    def test_checked_before_trimming(self) -> None:
        assert safe_parse(email_schema, "Ana@Example.com").data == "ana@example.com"
        assert safe_parse(email_schema, "  Ana@Example.com").errors == {"_general": "Invalid email"}

    def test_empty(self) -> None:
        assert safe_parse(email_schema, "").errors == {"_general": "Email is required"}

    def test_invalid(self) -> None:
        assert safe_parse(email_schema, "ana@").errors == {"_general": "Invalid email"}


class TestPasswordSchema:
    def test_strong(self) -> None:
        assert password_schema.parse("Str0ng!pass") == "Str0ng!pass"

    def test_first_issue_becomes_general_error(self) -> None:
        result = validate_form(password_schema, "short")
        # All issues are pathless, so the first becomes the general error
        assert result.general_error == "Password must be at least 8 characters"

    def test_signup_password_needs_no_special_character(self) -> None:
        error = validate_field(create_user_schema, "password", "Abcdefg1")
        assert error is None
        assert not safe_parse(password_schema, "Abcdefg1").success


class TestDocumentSchemas:
    def test_cpf_valid(self) -> None:
        assert cpf_schema.parse("529.982.247-25") == "529.982.247-25"

    def test_cpf_bad_format_reports_once(self) -> None:
        result = validate_form(cpf_schema, "abc")
        assert result.general_error == "Invalid CPF"

    def test_cpf_bad_checksum(self) -> None:
        assert not safe_parse(cpf_schema, "111.111.111-11").success

    def test_cnpj(self) -> None:
        assert safe_parse(cnpj_schema, "11.222.333/0001-81").success
        assert not safe_parse(cnpj_schema, "11.222.333/0001-80").success

    def test_cpf_fullwidth_digits(self) -> None:
        result = safe_parse(cpf_schema, "５２９９８２２４７２５")
        assert result.errors == {"_general": "Invalid CPF"}

    @pytest.mark.parametrize("value", ["52998224725\n", "529.982.247-25\n"])
    def test_cpf_trailing_newline(self, value: str) -> None:
        assert safe_parse(cpf_schema, value).errors == {"_general": "Invalid CPF"}

    def test_cnpj_trailing_newline(self) -> None:
        assert not safe_parse(cnpj_schema, "11222333000181\n").success


class TestSimpleSchemas:
    @pytest.mark.parametrize("value", ["(11) 98765-4321", "+55 11 98765-4321", "98765-4321"])
    def test_phone_valid(self, value: str) -> None:
        assert safe_parse(phone_schema, value).success

    def test_phone_invalid(self) -> None:
        assert not safe_parse(phone_schema, "12-34").success

    def test_phone_trailing_newline(self) -> None:
        assert not safe_parse(phone_schema, "11987654321\n").success

    def test_phone_fullwidth_digits(self) -> None:
        assert not safe_parse(phone_schema, "９８７６５-４３２１").success

    def test_url(self) -> None:
        assert safe_parse(url_schema, "https://example.com").success
        assert safe_parse(url_schema, "nope").errors == {"_general": "Invalid URL"}

    def test_non_empty_string_trims(self) -> None:
        assert non_empty_string_schema.parse("  Ana ") == "Ana"
        assert not safe_parse(non_empty_string_schema, "").success

    def test_non_empty_string_rejects_whitespace(self) -> None:
        assert safe_parse(non_empty_string_schema, "   ").errors == {"_general": "Field cannot be empty"}

    def test_positive_number(self) -> None:
        assert positive_number_schema.parse(2.5) == 2.5
        assert safe_parse(positive_number_schema, 0).errors == {"_general": "Number must be positive"}
        assert not safe_parse(positive_number_schema, "3").success


class TestDateSchemas:
    def test_coerces_iso_string(self) -> None:
        assert date_schema.parse("2020-01-02") == dt.datetime(2020, 1, 2)

    def test_missing(self) -> None:
        assert safe_parse(date_schema, None).errors == {"_general": "Date is required"}

    def test_invalid(self) -> None:
        assert safe_parse(date_schema, "not a date").errors == {"_general": "Invalid date"}

    def test_future_and_past(self) -> None:
        tomorrow = dt.datetime.now() + dt.timedelta(days=1)
        yesterday = dt.datetime.now() - dt.timedelta(days=1)
        assert safe_parse(future_date_schema, tomorrow).success
        assert not safe_parse(future_date_schema, yesterday).success
        assert safe_parse(past_date_schema, yesterday).success
        assert safe_parse(past_date_schema, tomorrow).errors == {"_general": "Date must be in the past"}

    def test_timezone_aware(self) -> None:
        later = dt.datetime.now(dt.UTC) + dt.timedelta(hours=1)
        assert safe_parse(future_date_schema, later.isoformat()).success


def _signup(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "name": "Ana Souza",
        "email": "Ana@Example.com",
        "password": "Secret123",
        "confirm_password": "Secret123",
    }
    data.update(overrides)
    return data


class TestCreateUserSchema:
    def test_valid(self) -> None:
        result = validate_form(create_user_schema, _signup(phone="(11) 98765-4321"))
        assert result.is_valid
        assert result.data == {
            "name": "Ana Souza",
            "email": "ana@example.com",
            "phone": "(11) 98765-4321",
            "password": "Secret123",
            "confirm_password": "Secret123",
        }

    def test_field_errors(self) -> None:
        result = validate_form(create_user_schema, _signup(name="A", email="nope", cpf="123"))
        assert set(result.field_errors or {}) == {"name", "email", "cpf"}
        assert result.field_errors["name"] == FieldError("Name must be at least 2 characters", "too_small")

    def test_name_length_counts_after_trimming(self) -> None:
        result = validate_form(create_user_schema, _signup(name="  A  "))
        assert result.field_errors == {"name": FieldError("Name must be at least 2 characters", "too_small")}
        assert validate_form(create_user_schema, _signup(name="  Ana  ")).data["name"] == "Ana"

    def test_password_confirmation(self) -> None:
        result = validate_form(create_user_schema, _signup(confirm_password="Other123"))
        assert result.field_errors == {"confirm_password": FieldError("Passwords do not match", "custom")}

    def test_field_check_skips_confirmation(self) -> None:
        assert validate_field(create_user_schema, "confirm_password", "anything") is None


class TestOtherUserSchemas:
    def test_update_accepts_empty(self) -> None:
        assert safe_parse(update_user_schema, {}).data == {}

    def test_update_still_validates_present_fields(self) -> None:
        assert safe_parse(update_user_schema, {"email": "bad"}).errors == {"email": "Invalid email"}

    def test_login(self) -> None:
        assert safe_parse(login_schema, {"email": "a@b.co", "password": "x"}).success
        assert safe_parse(login_schema, {"email": "a@b.co", "password": ""}).errors == {
            "password": "Password is required"
        }
