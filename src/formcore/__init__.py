"""formcore — schema-driven validation and form state for frontends.

Validates raw input against a schema into uniform results, checks single
fields while the user types, debounces bursts of checks, and keeps a
form's values, errors and submission status.

Basic usage::

    from formcore import FormController, safe_parse
    from formcore.schemas import login_schema

    result = safe_parse(login_schema, {"email": "ana@example.com", "password": "x"})
    if result:
        print(result.data)

    form = FormController(login_schema, on_submit=sign_in)
    form.set_value("email", "ana@example.com")
    await form.handle_submit()

Pydantic models (``pip install formcore``, pydantic is a dependency)::

    from formcore.schema.pydantic import PydanticSchema
    result = validate_form(PydanticSchema(Login), payload)
"""

__version__ = "0.1.0"
__all__ = [
    "AsyncValidator",
    "ConfigurationError",
    "FieldError",
    "FormController",
    "FormPhase",
    "FormState",
    "FormValidationResult",
    "FormcoreError",
    "Issue",
    "Schema",
    "SchemaValidationError",
    "ValidationConfig",
    "ValidationResult",
    "ValidatorClosed",
    "create_async_validator",
    "create_validator",
    "parse_or_throw",
    "safe_parse",
    "validate_async",
    "validate_field",
    "validate_form",
]

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "AsyncValidator": "formcore.validation.debounce",
    "ConfigurationError": "formcore.errors",
    "FieldError": "formcore.validation.result",
    "FormController": "formcore.controller",
    "FormPhase": "formcore.controller",
    "FormState": "formcore.controller",
    "FormValidationResult": "formcore.validation.result",
    "FormcoreError": "formcore.errors",
    "Issue": "formcore.schema.protocol",
    "Schema": "formcore.schema.protocol",
    "SchemaValidationError": "formcore.errors",
    "ValidationConfig": "formcore.config",
    "ValidationResult": "formcore.validation.result",
    "ValidatorClosed": "formcore.errors",
    "create_async_validator": "formcore.validation.debounce",
    "create_validator": "formcore.validation.core",
    "parse_or_throw": "formcore.validation.core",
    "safe_parse": "formcore.validation.core",
    "validate_async": "formcore.validation.debounce",
    "validate_field": "formcore.validation.form",
    "validate_form": "formcore.validation.form",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formcore`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    from importlib import import_module

    return getattr(import_module(module_name), name)
