"""Pydantic-backed schemas.

Wraps a ``BaseModel`` subclass so it satisfies the ``Schema`` protocol,
including per-field lookup::

    from pydantic import BaseModel, Field
    from formcore.schema.pydantic import PydanticSchema

    class Profile(BaseModel):
        name: str = Field(min_length=1)
        age: float = Field(gt=0)

    schema = PydanticSchema(Profile)
    safe_parse(schema, {"name": "Ana", "age": 30}).data   # Profile(name='Ana', age=30.0)
    validate_field(schema, "age", -1)                       # FieldError(..., code="greater_than")

Pydantic's error ``loc`` becomes the issue path, ``msg`` the message, and
``type`` the code.
"""

from __future__ import annotations

from functools import cached_property
from typing import Annotated, Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from formcore.errors import SchemaValidationError
from formcore.schema.protocol import Issue

__all__ = ["PydanticFieldSchema", "PydanticSchema", "issues_from"]


def issues_from(error: ValidationError) -> list[Issue]:
    """Translate a pydantic ``ValidationError`` into ordered issues."""
    return [
        Issue(path=tuple(detail["loc"]), message=detail["msg"], code=detail["type"])
        for detail in error.errors()
    ]


class PydanticSchema[M: BaseModel]:
    """Schema backed by a pydantic model class."""

    def __init__(self, model: type[M]) -> None:
        self.model = model

    def parse(self, raw: Any) -> M:
        try:
            return self.model.model_validate(raw)
        except ValidationError as exc:
            raise SchemaValidationError(issues_from(exc)) from exc

    def field_schema(self, name: str) -> PydanticFieldSchema | None:
        return self._field_schemas.get(name)

    @cached_property
    def _field_schemas(self) -> dict[str, PydanticFieldSchema]:
        return {
            name: PydanticFieldSchema(info.annotation, info)
            for name, info in self.model.model_fields.items()
        }

    def __repr__(self) -> str:
        return f"PydanticSchema({self.model.__name__})"


class PydanticFieldSchema:
    """Schema for one model field: its annotation plus its ``Field()`` constraints."""

    __slots__ = ("_adapter",)

    def __init__(self, annotation: Any, field_info: Any) -> None:
        self._adapter: TypeAdapter[Any] = TypeAdapter(Annotated[annotation, field_info])

    def parse(self, raw: Any) -> Any:
        try:
            return self._adapter.validate_python(raw)
        except ValidationError as exc:
            raise SchemaValidationError(issues_from(exc)) from exc
