"""Ready-made schemas for common fields and user accounts."""

from formcore.schemas.common import (
    cnpj_schema,
    cpf_schema,
    date_schema,
    email_schema,
    future_date_schema,
    non_empty_string_schema,
    password_schema,
    past_date_schema,
    phone_schema,
    positive_number_schema,
    url_schema,
)
from formcore.schemas.user import create_user_schema, login_schema, update_user_schema

__all__ = [
    "cnpj_schema",
    "cpf_schema",
    "create_user_schema",
    "date_schema",
    "email_schema",
    "future_date_schema",
    "login_schema",
    "non_empty_string_schema",
    "password_schema",
    "past_date_schema",
    "phone_schema",
    "positive_number_schema",
    "update_user_schema",
    "url_schema",
]
