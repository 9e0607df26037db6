"""Form validator — whole-payload and single-field checks.

``validate_form`` runs the same schema evaluation as ``safe_parse`` but
reports ``FieldError`` objects (message + rule code) and separates
failures that cannot be pinned to a field into ``general_error``.

``validate_field`` is best-effort partial validation: it only works for
schemas that can hand out a per-field sub-schema, and quietly reports no
error for everything else so an edit-time check never blocks the user.
"""

import logging
from typing import Any

from formcore.config import DEFAULT_CONFIG, ValidationConfig
from formcore.errors import SchemaValidationError
from formcore.schema.protocol import Schema, sub_schema
from formcore.validation.result import FieldError, FormValidationResult

logger = logging.getLogger("formcore.validation")


def validate_form[T](
    schema: Schema,
    data: Any,
    *,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> FormValidationResult[T]:
    """Validate a complete form payload against *schema*.

    Returns:
        ``FormValidationResult.valid(parsed)`` on success. On failure,
        ``invalid(field_errors)`` when issues carry field paths, or
        ``general(message)`` when none do or the schema failed in a way
        it did not describe.

    Example::

        result = validate_form(profile_schema, {"name": "", "age": -1})
        # result.field_errors == {
        #     "name": FieldError("Required", "too_small"),
        #     "age": FieldError("Must be positive", "too_small"),
        # }
    """
    try:
        parsed = schema.parse(data)
    except SchemaValidationError as exc:
        if not exc.issues:
            logger.debug("Schema %r raised SchemaValidationError without issues", schema)
            return FormValidationResult.general(config.unknown_error_message)
        if all(not issue.path for issue in exc.issues):
            return FormValidationResult.general(exc.issues[0].message)
        field_errors: dict[str, FieldError] = {}
        for issue in exc.issues:
            key = issue.dotted_path or config.general_key
            field_errors[key] = FieldError(message=issue.message, code=issue.code)
        return FormValidationResult.invalid(field_errors)
    except Exception:
        logger.debug("Schema %r failed with an unrecognized error", schema, exc_info=True)
        return FormValidationResult.general(config.unknown_error_message)
    return FormValidationResult.valid(parsed)


def validate_field(
    schema: Schema,
    field_name: str,
    value: Any,
    *,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> FieldError | None:
    """Validate one field's *value* against its sub-schema.

    The value is checked alone, not inside the enclosing object, so
    cross-field refinements do not run here.

    Returns:
        The first reported error for the field, or ``None`` when the value
        passes, the schema has no per-field lookup, or the field is unknown.
    """
    field_schema = sub_schema(schema, field_name)
    if field_schema is None:
        return None

    try:
        field_schema.parse(value)
    except SchemaValidationError as exc:
        if not exc.issues:
            return FieldError(message=config.invalid_field_message)
        first = exc.issues[0]
        return FieldError(message=first.message, code=first.code)
    except Exception:
        logger.debug("Field schema for %r failed with an unrecognized error", field_name, exc_info=True)
        return FieldError(message=config.field_error_message)
    return None
