"""Schema-driven validation — uniform results, partial and debounced checks.

Usage::

    from formcore.validation import safe_parse, validate_field, validate_form

    result = safe_parse(signup_schema, payload)
    if result:
        save(result.data)
    else:
        show_errors(result.errors)   # {"email": "Invalid email", ...}

    error = validate_field(signup_schema, "email", "not-an-email")
    # FieldError(message="Invalid email", code="invalid_string")
"""

from formcore.validation.core import (
    Validator,
    collect_errors,
    create_validator,
    parse_or_throw,
    safe_parse,
)
from formcore.validation.debounce import (
    AsyncValidator,
    create_async_validator,
    validate_async,
)
from formcore.validation.form import validate_field, validate_form
from formcore.validation.result import (
    FieldError,
    FormValidationResult,
    ValidationResult,
)

__all__ = [
    "AsyncValidator",
    "FieldError",
    "FormValidationResult",
    "ValidationResult",
    "Validator",
    "collect_errors",
    "create_async_validator",
    "create_validator",
    "parse_or_throw",
    "safe_parse",
    "validate_async",
    "validate_field",
    "validate_form",
]
