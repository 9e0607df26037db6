"""Schemas — the capability the validators consume, plus a rule-based engine.

Anything with ``parse(raw)`` that raises ``SchemaValidationError`` is a
schema. The rule engine here is one implementation; the pydantic adapter
lives in ``formcore.schema.pydantic`` so ``pydantic`` is only imported
when used.
"""

from formcore.schema.fields import (
    FieldSchema,
    ListSchema,
    ObjectSchema,
    Refinement,
    as_number,
    as_string,
    as_stripped_string,
    to_datetime,
    to_number,
)
from formcore.schema.protocol import (
    FieldSchemaProvider,
    Issue,
    Schema,
    SchemaValidationError,
    dotted,
    sub_schema,
)

__all__ = [
    "FieldSchema",
    "FieldSchemaProvider",
    "Issue",
    "ListSchema",
    "ObjectSchema",
    "Refinement",
    "Schema",
    "SchemaValidationError",
    "as_number",
    "as_string",
    "as_stripped_string",
    "dotted",
    "sub_schema",
    "to_datetime",
    "to_number",
]
