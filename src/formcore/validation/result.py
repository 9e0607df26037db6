"""Validation results — immutable containers for validated data or errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult[T]:
    """The outcome of running a schema over raw input.

    Exactly one of ``data`` and ``errors`` is present. The result is falsy
    when invalid, so you can write::

        result = safe_parse(schema, payload)
        if not result:
            show(result.errors)

    ``errors`` maps dotted field paths to messages::

        {"name": "Name is required", "items.0.sku": "Required"}

    Build instances with ``ValidationResult.ok()`` and
    ``ValidationResult.fail()``; they enforce the invariant.
    """

    success: bool
    data: T | None = None
    errors: dict[str, str] | None = None

    @classmethod
    def ok(cls, data: T) -> ValidationResult[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, errors: dict[str, str]) -> ValidationResult[T]:
        if not errors:
            msg = "A failed ValidationResult needs at least one error"
            raise ValueError(msg)
        return cls(success=False, errors=dict(errors))

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.success


@dataclass(frozen=True, slots=True)
class FieldError:
    """One field's failure: a message plus the rule code, if known."""

    message: str
    code: str | None = None


@dataclass(frozen=True, slots=True)
class FormValidationResult[T]:
    """The outcome of validating a whole form payload.

    Exactly one of ``data``, ``field_errors`` and ``general_error`` is set:

    - ``data`` when ``is_valid``;
    - ``field_errors`` (dotted path -> ``FieldError``) when the failure
      can be pinned to fields;
    - ``general_error`` when it cannot.
    """

    is_valid: bool
    data: T | None = None
    field_errors: dict[str, FieldError] | None = None
    general_error: str | None = None

    @classmethod
    def valid(cls, data: T) -> FormValidationResult[T]:
        return cls(is_valid=True, data=data)

    @classmethod
    def invalid(cls, field_errors: dict[str, FieldError]) -> FormValidationResult[T]:
        if not field_errors:
            msg = "An invalid FormValidationResult needs at least one field error"
            raise ValueError(msg)
        return cls(is_valid=False, field_errors=dict(field_errors))

    @classmethod
    def general(cls, message: str) -> FormValidationResult[T]:
        return cls(is_valid=False, general_error=message)

    def __bool__(self) -> bool:
        return self.is_valid

    def errors_for_display(self, general_key: str) -> dict[str, FieldError]:
        """Flatten into one mapping, placing a general error under *general_key*."""
        if self.field_errors:
            return dict(self.field_errors)
        if self.general_error is not None:
            return {general_key: FieldError(self.general_error)}
        return {}
