"""Built-in validation rules for the bundled field schemas.

Each rule is a callable with the signature::

    def rule(value: Any) -> str | None:
        '''Return error message, or None if valid.'''

and carries a ``code`` naming the rule class, reported alongside the
message in ``Issue.code``.

Parameterized rules are factory functions returning a rule::

    max_length(200)
    matches(r"^\\d{5}\\Z", "Use five digits")

Every rule can swap its message without changing its check::

    required.with_message("Email is required")

Custom rules come from ``predicate()``; any callable matching
``(Any) -> str | None`` also works, with code ``"custom"``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from formcore.checks import is_valid_email, is_valid_url

__all__ = [
    "Rule",
    "email",
    "integer",
    "matches",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "positive",
    "predicate",
    "required",
    "rule_code",
    "url",
]


@dataclass(frozen=True, slots=True)
class Rule:
    """A named check with a fixed message.

    ``stops_chain`` makes a failing rule end the field's rule list, so a
    presence failure is not followed by a pile of length/format errors.
    """

    check: Callable[[Any], bool]
    message: str
    code: str = "custom"
    stops_chain: bool = False

    def __call__(self, value: Any) -> str | None:
        if self.check(value):
            return None
        return self.message

    def with_message(self, message: str) -> Rule:
        return replace(self, message=message)


def rule_code(rule: Callable[[Any], str | None]) -> str:
    """Return *rule*'s code, ``"custom"`` for plain callables."""
    return getattr(rule, "code", "custom")


def predicate(check: Callable[[Any], bool], message: str, code: str = "custom") -> Rule:
    """Build a rule from a boolean check."""
    return Rule(check, message, code)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


required = Rule(_present, "This field is required", "required", stops_chain=True)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int, message: str | None = None) -> Rule:
    """Value must have at most *n* characters (or items)."""
    return Rule(lambda value: len(value) <= n, message or f"Must be at most {n} characters", "too_big")


def min_length(n: int, message: str | None = None) -> Rule:
    """Value must have at least *n* characters (or items)."""
    return Rule(lambda value: len(value) >= n, message or f"Must be at least {n} characters", "too_small")


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

email = Rule(is_valid_email, "Must be a valid email address", "invalid_string")

url = Rule(is_valid_url, "Must be a valid URL", "invalid_string")


def matches(pattern: str, message: str | None = None, *, flags: int = re.ASCII) -> Rule:
    """Value must contain a match for the given regex pattern (``re.search``).

    Patterns compile with ``re.ASCII`` by default, so ``\\d`` means ``[0-9]``.
    ``$`` still matches before a trailing newline; anchor with ``\\Z`` to
    reject it.
    """
    compiled = re.compile(pattern, flags)
    return Rule(
        lambda value: compiled.search(value) is not None,
        message or f"Must match pattern: {pattern}",
        "invalid_string",
    )


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str, message: str | None = None) -> Rule:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)
    options = ", ".join(sorted(allowed))
    return Rule(lambda value: value in allowed, message or f"Must be one of: {options}", "invalid_enum_value")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    try:
        int(value)
    except (ValueError, TypeError):
        return False
    return True


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    try:
        float(value)
    except (ValueError, TypeError):
        return False
    return True


integer = Rule(_is_integer, "Must be a whole number", "invalid_type")

number = Rule(_is_number, "Must be a number", "invalid_type")


def _is_positive(value: Any) -> bool:
    return _is_number(value) and float(value) > 0


positive = Rule(_is_positive, "Must be a positive number", "too_small")
