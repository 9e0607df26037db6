"""formcore exception hierarchy.

Shared across the validators, the async wrapper, and the form controller
so every module raises and catches the same types.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formcore.schema.protocol import Issue


class FormcoreError(Exception):
    """Base for all formcore-specific errors."""


class ConfigurationError(FormcoreError):
    """Raised when a configuration value is invalid.

    Typically raised from ``ValidationConfig.__post_init__`` or when an
    async validator is created with a negative debounce window.
    """


class ValidatorClosed(FormcoreError):  # noqa: N818
    """Raised when an ``AsyncValidator`` is called after ``close()``."""


class SchemaValidationError(FormcoreError):
    """Structured schema failure — the shape the validators recognize.

    Raised by ``Schema.parse()`` when input does not conform. Carries the
    ordered issues reported by the schema; each issue has a path, a
    human-readable message, and an optional rule code.

    Attributes:
        issues: Ordered tuple of ``Issue`` instances.
    """

    def __init__(self, issues: Sequence[Issue]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        if self.issues:
            summary = "; ".join(f"{i.dotted_path or '<root>'}: {i.message}" for i in self.issues)
        else:
            summary = "no issues reported"
        super().__init__(f"Schema validation failed: {summary}")

    @property
    def errors(self) -> dict[str, str]:
        """Dotted path -> message. A repeated path keeps the last message."""
        return {issue.dotted_path: issue.message for issue in self.issues}

    def prefixed(self, *segments: str | int) -> SchemaValidationError:
        """Return a copy with *segments* prepended to every issue path."""
        return SchemaValidationError([issue.under(*segments) for issue in self.issues])
