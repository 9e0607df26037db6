"""Core validator — wrap a schema into a uniform success/failure result.

``safe_parse`` and ``create_validator`` never raise for bad input; they
always return a ``ValidationResult``. ``parse_or_throw`` is a thin layer
on top for callers that prefer exception-style control flow.
"""

import logging
from collections.abc import Callable
from typing import Any

from formcore.config import DEFAULT_CONFIG, ValidationConfig
from formcore.errors import SchemaValidationError
from formcore.schema.protocol import Schema
from formcore.validation.result import ValidationResult

logger = logging.getLogger("formcore.validation")

type Validator[T] = Callable[[Any], ValidationResult[T]]


def collect_errors(error: SchemaValidationError, general_key: str) -> dict[str, str]:
    """Map each issue's dotted path to its message.

    A path reported more than once keeps the last message. Issues with an
    empty path land under *general_key*.
    """
    errors: dict[str, str] = {}
    for issue in error.issues:
        errors[issue.dotted_path or general_key] = issue.message
    return errors


def create_validator[T](schema: Schema, *, config: ValidationConfig = DEFAULT_CONFIG) -> Validator[T]:
    """Return a function that validates data against *schema*.

    Usage::

        check = create_validator(user_schema)
        result = check({"name": "Ana"})
        if not result:
            # result.errors == {"email": "Email is required"}
            ...
    """

    def validate(data: Any) -> ValidationResult[T]:
        try:
            parsed = schema.parse(data)
        except SchemaValidationError as exc:
            errors = collect_errors(exc, config.general_key)
            if errors:
                return ValidationResult.fail(errors)
            logger.debug("Schema %r raised SchemaValidationError without issues", schema)
        except Exception:
            logger.debug("Schema %r failed with an unrecognized error", schema, exc_info=True)
        else:
            return ValidationResult.ok(parsed)
        return ValidationResult.fail({config.general_key: config.unknown_error_message})

    return validate


def safe_parse[T](schema: Schema, data: Any, *, config: ValidationConfig = DEFAULT_CONFIG) -> ValidationResult[T]:
    """Validate *data* once. Shorthand for ``create_validator(schema)(data)``."""
    return create_validator(schema, config=config)(data)


def parse_or_throw(schema: Schema, data: Any) -> Any:
    """Parse *data*, letting the schema's own exception propagate unchanged.

    Raises:
        SchemaValidationError: Or whatever else the schema raises.
    """
    return schema.parse(data)
