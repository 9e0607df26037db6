"""Schema capability — the only contract the validators depend on.

A schema is anything with a ``parse`` method::

    class Schema(Protocol):
        def parse(self, raw: Any) -> Any: ...

``parse`` returns the typed value, or raises ``SchemaValidationError``
with one ``Issue`` per violated rule. Object-shaped schemas may also
expose ``field_schema(name)`` so a single field can be validated on its
own; schemas without it are still valid schemas, and field-level checks
simply report no error for them.

The bundled engines (``formcore.schema.fields`` and
``formcore.schema.pydantic``) satisfy this protocol, but nothing in the
validators imports them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from formcore.errors import SchemaValidationError

__all__ = [
    "FieldSchemaProvider",
    "Issue",
    "Schema",
    "SchemaValidationError",
    "dotted",
    "sub_schema",
]

logger = logging.getLogger("formcore.schema")

type PathSegment = str | int


def dotted(path: tuple[PathSegment, ...]) -> str:
    """Join path segments with dots: ``("items", 0, "sku")`` -> ``"items.0.sku"``."""
    return ".".join(str(segment) for segment in path)


@dataclass(frozen=True, slots=True)
class Issue:
    """One field-scoped failure reported by a schema.

    Attributes:
        path: Property/index segments locating the value. Empty for
            failures that concern the whole input.
        message: Human-readable message, passed through unmodified.
        code: The violated rule class (``"too_small"``, ``"invalid_type"``),
            when the schema supplies one.
    """

    path: tuple[PathSegment, ...]
    message: str
    code: str | None = None

    @property
    def dotted_path(self) -> str:
        return dotted(self.path)

    def under(self, *segments: PathSegment) -> Issue:
        """Return this issue relocated beneath *segments*."""
        return Issue(path=(*segments, *self.path), message=self.message, code=self.code)


@runtime_checkable
class Schema(Protocol):
    """Converts raw input into a typed value or raises ``SchemaValidationError``."""

    def parse(self, raw: Any) -> Any: ...


@runtime_checkable
class FieldSchemaProvider(Protocol):
    """Optional capability: look up the sub-schema of one named field."""

    def field_schema(self, name: str) -> Schema | None: ...


def sub_schema(schema: Any, name: str) -> Schema | None:
    """Return the sub-schema for *name*, or ``None`` if unavailable.

    ``None`` covers both a schema without ``field_schema`` and a field the
    schema does not know about. A lookup that raises is logged at DEBUG
    and treated as unknown.
    """
    if not isinstance(schema, FieldSchemaProvider):
        return None
    try:
        return schema.field_schema(name)
    except Exception:
        logger.debug("field_schema(%r) failed on %r", name, schema, exc_info=True)
        return None
