"""Plain predicates for common formats and Brazilian document numbers.

These are the building blocks behind ``formcore.schemas``; prefer the
schemas when you need messages and error codes::

    from formcore.schemas import cpf_schema
    safe_parse(cpf_schema, "529.982.247-25")

The predicates are handy where only a yes/no answer is needed.
"""

import re
from urllib.parse import urlsplit

# Basic email pattern: checks structure, not deliverability
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

_NON_DIGITS_RE = re.compile(r"[^0-9]")
_REPEATED_DIGIT_RE = re.compile(r"([0-9])\1+")


def is_valid_email(value: object) -> bool:
    """Value is a string shaped like an email address."""
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


def is_valid_url(value: object) -> bool:
    """Value is an absolute URL with a scheme and a network location."""
    if not isinstance(value, str) or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def only_digits(value: str) -> str:
    """Strip punctuation: ``"529.982.247-25"`` -> ``"52998224725"``."""
    return _NON_DIGITS_RE.sub("", value)


def _cpf_digit(digits: str, weight: int) -> int:
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def is_valid_cpf(value: object) -> bool:
    """Value is a CPF (11 digits, punctuation allowed) with valid check digits."""
    if not isinstance(value, str):
        return False
    cpf = only_digits(value)
    if len(cpf) != 11 or _REPEATED_DIGIT_RE.fullmatch(cpf):
        return False
    if _cpf_digit(cpf[:9], 10) != int(cpf[9]):
        return False
    return _cpf_digit(cpf[:10], 11) == int(cpf[10])


def _cnpj_digit(digits: str) -> int:
    # Weights run 2..9 from the rightmost digit, wrapping back to 2
    total = 0
    weight = 2
    for d in reversed(digits):
        total += int(d) * weight
        weight = 2 if weight == 9 else weight + 1
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cnpj(value: object) -> bool:
    """Value is a CNPJ (14 digits, punctuation allowed) with valid check digits."""
    if not isinstance(value, str):
        return False
    cnpj = only_digits(value)
    if len(cnpj) != 14 or _REPEATED_DIGIT_RE.fullmatch(cnpj):
        return False
    if _cnpj_digit(cnpj[:12]) != int(cnpj[12]):
        return False
    return _cnpj_digit(cnpj[:13]) == int(cnpj[13])
