"""Reusable field schemas for common inputs.

Usage::

    from formcore.schemas import cpf_schema, email_schema

    safe_parse(email_schema, "Ana@Example.com").data     # "ana@example.com"
    validate_field(signup_schema, "cpf", "111.111.111-11")  # FieldError("Invalid CPF", "custom")
"""

import datetime as dt
from dataclasses import replace

from formcore.checks import is_valid_cnpj, is_valid_cpf
from formcore.schema.fields import FieldSchema, as_number, as_string, as_stripped_string, to_datetime
from formcore.schema.rules import email, matches, min_length, positive, predicate, required, url

__all__ = [
    "cnpj_schema",
    "cpf_schema",
    "date_schema",
    "email_schema",
    "future_date_schema",
    "non_empty_string_schema",
    "password_schema",
    "past_date_schema",
    "phone_schema",
    "positive_number_schema",
    "url_schema",
]


def _normalize_email(value: str) -> str:
    return value.lower().strip()


email_schema = FieldSchema(
    required.with_message("Email is required"),
    email.with_message("Invalid email"),
    coerce=as_string,
    transform=_normalize_email,
    missing_message="Email is required",
)

password_schema = FieldSchema(
    min_length(8, "Password must be at least 8 characters"),
    matches(r"[A-Z]", "Password must contain at least one uppercase letter"),
    matches(r"[a-z]", "Password must contain at least one lowercase letter"),
    matches(r"[0-9]", "Password must contain at least one number"),
    matches(r"[^A-Za-z0-9]", "Password must contain at least one special character"),
    coerce=as_string,
)

# A malformed number skips the checksum so the message is reported once
cpf_schema = FieldSchema(
    replace(matches(r"^\d{3}\.\d{3}\.\d{3}-\d{2}\Z|^\d{11}\Z", "Invalid CPF"), stops_chain=True),
    predicate(is_valid_cpf, "Invalid CPF"),
    coerce=as_string,
)

cnpj_schema = FieldSchema(
    replace(matches(r"^\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}\Z|^\d{14}\Z", "Invalid CNPJ"), stops_chain=True),
    predicate(is_valid_cnpj, "Invalid CNPJ"),
    coerce=as_string,
)

phone_schema = FieldSchema(
    matches(
        r"^(\+55\s?)?(\(?\d{2}\)?\s?)?(\d{4,5}-?\d{4})\Z",
        "Invalid phone number. Use the format: (XX) XXXXX-XXXX",
    ),
    coerce=as_string,
)

url_schema = FieldSchema(url.with_message("Invalid URL"), coerce=as_string)

non_empty_string_schema = FieldSchema(
    min_length(1, "Field cannot be empty"),
    coerce=as_stripped_string,
)

positive_number_schema = FieldSchema(positive.with_message("Number must be positive"), coerce=as_number)

date_schema = FieldSchema(coerce=to_datetime, missing_message="Date is required")


def _now_like(value: dt.datetime) -> dt.datetime:
    return dt.datetime.now(value.tzinfo)


future_date_schema = date_schema.refine(lambda value: value > _now_like(value), "Date must be in the future")

past_date_schema = date_schema.refine(lambda value: value < _now_like(value), "Date must be in the past")
