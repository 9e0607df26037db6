"""User account schemas — sign-up, profile update, and login."""

from formcore.schema.fields import FieldSchema, ObjectSchema, as_string
from formcore.schema.rules import matches, min_length
from formcore.schemas.common import (
    cpf_schema,
    email_schema,
    non_empty_string_schema,
    phone_schema,
)

__all__ = ["create_user_schema", "login_schema", "update_user_schema"]

_name_schema = non_empty_string_schema.extend(min_length(2, "Name must be at least 2 characters"))

create_user_schema = ObjectSchema(
    {
        "name": _name_schema,
        "email": email_schema,
        "cpf": cpf_schema.as_optional(),
        "phone": phone_schema.as_optional(),
        "password": FieldSchema(
            min_length(8, "Password must be at least 8 characters"),
            matches(r"[A-Z]", "Password must contain at least one uppercase letter"),
            matches(r"[a-z]", "Password must contain at least one lowercase letter"),
            matches(r"[0-9]", "Password must contain at least one number"),
            coerce=as_string,
        ),
        "confirm_password": FieldSchema(coerce=as_string),
    }
).refine(
    lambda data: data["password"] == data["confirm_password"],
    "Passwords do not match",
    path=("confirm_password",),
)

update_user_schema = ObjectSchema(
    {
        "name": _name_schema,
        "email": email_schema,
        "phone": phone_schema,
    }
).partial()

login_schema = ObjectSchema(
    {
        "email": email_schema,
        "password": FieldSchema(min_length(1, "Password is required"), coerce=as_string),
    }
)
