"""Validation configuration.

ValidationConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from formcore.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(debounce_ms=150, general_key="__all__")
    """

    # Async validation
    debounce_ms: float = 300

    # Key used for errors that are not attributable to a single field
    general_key: str = "_general"

    # Fallback messages
    unknown_error_message: str = "Unknown validation error"
    invalid_field_message: str = "Invalid field"
    field_error_message: str = "Validation error"

    def __post_init__(self) -> None:
        if self.debounce_ms < 0:
            msg = f"debounce_ms must be >= 0, got {self.debounce_ms!r}"
            raise ConfigurationError(msg)
        if not self.general_key:
            msg = "general_key must be a non-empty string"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ValidationConfig()
