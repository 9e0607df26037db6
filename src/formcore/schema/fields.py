"""Rule-based schemas — fields, objects, and lists.

A small engine that satisfies the ``Schema`` protocol using the rules in
``formcore.schema.rules``::

    from formcore.schema import FieldSchema, ObjectSchema, as_number, as_string
    from formcore.schema.rules import max_length, positive, required

    profile = ObjectSchema({
        "name": FieldSchema(required, max_length(80), coerce=as_string),
        "age": FieldSchema(positive, coerce=as_number),
    })

    profile.parse({"name": "Ana", "age": 30})   # {"name": "Ana", "age": 30}
    profile.parse({"name": "", "age": -1})      # raises SchemaValidationError
    profile.field_schema("age")                 # the "age" FieldSchema

Order of operations for a field: presence, coercion, rules, transform.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from formcore.errors import SchemaValidationError
from formcore.schema.protocol import Issue, PathSegment, Schema
from formcore.schema.rules import predicate, rule_code

__all__ = [
    "FieldSchema",
    "ListSchema",
    "ObjectSchema",
    "Refinement",
    "as_number",
    "as_string",
    "as_stripped_string",
    "to_datetime",
    "to_number",
]

type RuleFn = Callable[[Any], str | None]
type Coercion = Callable[[Any], Any]


# ---------------------------------------------------------------------------
# Coercions: raise ValueError/TypeError with a user-facing message
# ---------------------------------------------------------------------------


def as_string(value: Any) -> str:
    """Accept strings only."""
    if not isinstance(value, str):
        msg = "Expected text"
        raise TypeError(msg)
    return value


def as_stripped_string(value: Any) -> str:
    """Accept strings only, trimmed before any rule sees them."""
    return as_string(value).strip()


def as_number(value: Any) -> int | float:
    """Accept ints and floats only (not bools, not numeric strings)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = "Expected a number"
        raise TypeError(msg)
    return value


def to_number(value: Any) -> int | float:
    """Accept numbers and numeric strings such as form inputs send."""
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            msg = "Expected a number"
            raise ValueError(msg) from None
    return as_number(value)


def to_datetime(value: Any) -> dt.datetime:
    """Accept datetimes, dates (as midnight), and ISO 8601 strings."""
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    if isinstance(value, str):
        try:
            return dt.datetime.fromisoformat(value.strip())
        except ValueError:
            msg = "Invalid date"
            raise ValueError(msg) from None
    msg = "Invalid date"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Field
# ---------------------------------------------------------------------------


class FieldSchema:
    """Schema for a single value, built from rules.

    Args:
        *rules: Rules run in order; every failure is collected, except
            that a failing ``stops_chain`` rule (``required``) ends the list.
        optional: ``None`` parses to ``None`` without running anything.
        coerce: Converts the raw value before the rules run. A
            ``ValueError``/``TypeError`` becomes an ``invalid_type`` issue
            with the exception text as message.
        transform: Applied to the value after all rules pass.
        missing_message: Message for a missing (``None``) required value.
    """

    __slots__ = ("coerce", "missing_message", "optional", "rules", "transform")

    def __init__(
        self,
        *rules: RuleFn,
        optional: bool = False,
        coerce: Coercion | None = None,
        transform: Callable[[Any], Any] | None = None,
        missing_message: str = "This field is required",
    ) -> None:
        self.rules: tuple[RuleFn, ...] = rules
        self.optional = optional
        self.coerce = coerce
        self.transform = transform
        self.missing_message = missing_message

    def _copy(self, **changes: Any) -> FieldSchema:
        params: dict[str, Any] = {
            "optional": self.optional,
            "coerce": self.coerce,
            "transform": self.transform,
            "missing_message": self.missing_message,
        }
        rules = changes.pop("rules", self.rules)
        params.update(changes)
        return FieldSchema(*rules, **params)

    def as_optional(self) -> FieldSchema:
        """Return a copy that accepts a missing value."""
        return self._copy(optional=True)

    def extend(self, *rules: RuleFn) -> FieldSchema:
        """Return a copy with *rules* appended."""
        return self._copy(rules=(*self.rules, *rules))

    def refine(self, check: Callable[[Any], bool], message: str, code: str = "custom") -> FieldSchema:
        """Return a copy with a boolean check appended as a rule."""
        return self.extend(predicate(check, message, code))

    def parse(self, raw: Any) -> Any:
        if raw is None:
            if self.optional:
                return None
            raise SchemaValidationError([Issue((), self.missing_message, "required")])

        value = raw
        if self.coerce is not None:
            try:
                value = self.coerce(raw)
            except (ValueError, TypeError) as exc:
                raise SchemaValidationError([Issue((), str(exc), "invalid_type")]) from exc

        issues: list[Issue] = []
        for rule in self.rules:
            try:
                message = rule(value)
            except (ValueError, TypeError):
                message = "Invalid value"
            if message is None:
                continue
            issues.append(Issue((), message, rule_code(rule)))
            if getattr(rule, "stops_chain", False):
                break
        if issues:
            raise SchemaValidationError(issues)

        if self.transform is not None:
            value = self.transform(value)
        return value

    def __repr__(self) -> str:
        flag = ", optional" if self.optional else ""
        return f"FieldSchema({len(self.rules)} rules{flag})"


# ---------------------------------------------------------------------------
# Object
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Refinement:
    """A whole-object check that runs after every field has passed.

    ``path`` attaches the failure to a field (``("confirm_password",)``);
    leave it empty for failures that concern the object as a whole.
    """

    check: Callable[[dict[str, Any]], bool]
    message: str
    path: tuple[PathSegment, ...] = ()
    code: str = "custom"


class ObjectSchema:
    """Schema for a mapping with named fields.

    Unknown keys are dropped from the parsed result, as are absent keys
    whose schema accepted the missing value (optional fields).
    """

    __slots__ = ("_fields", "_refinements")

    def __init__(self, fields: Mapping[str, Schema], *, refinements: Sequence[Refinement] = ()) -> None:
        self._fields: dict[str, Schema] = dict(fields)
        self._refinements: tuple[Refinement, ...] = tuple(refinements)

    @property
    def fields(self) -> Mapping[str, Schema]:
        return self._fields

    def field_schema(self, name: str) -> Schema | None:
        return self._fields.get(name)

    def refine(
        self,
        check: Callable[[dict[str, Any]], bool],
        message: str,
        *,
        path: tuple[PathSegment, ...] = (),
        code: str = "custom",
    ) -> ObjectSchema:
        """Return a copy with an extra whole-object check."""
        refinement = Refinement(check, message, path, code)
        return ObjectSchema(self._fields, refinements=(*self._refinements, refinement))

    def partial(self) -> ObjectSchema:
        """Return a copy where every ``FieldSchema`` field is optional."""
        fields = {
            name: schema.as_optional() if isinstance(schema, FieldSchema) else schema
            for name, schema in self._fields.items()
        }
        return ObjectSchema(fields)

    def parse(self, raw: Any) -> dict[str, Any]:
        if not isinstance(raw, Mapping):
            raise SchemaValidationError([Issue((), "Expected an object", "invalid_type")])

        issues: list[Issue] = []
        parsed: dict[str, Any] = {}
        for name, schema in self._fields.items():
            try:
                value = schema.parse(raw.get(name))
            except SchemaValidationError as exc:
                issues.extend(exc.prefixed(name).issues)
                continue
            if value is None and name not in raw:
                continue
            parsed[name] = value
        if issues:
            raise SchemaValidationError(issues)

        failures = [Issue(r.path, r.message, r.code) for r in self._refinements if not r.check(parsed)]
        if failures:
            raise SchemaValidationError(failures)
        return parsed

    def __repr__(self) -> str:
        return f"ObjectSchema({', '.join(self._fields)})"


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------


class ListSchema:
    """Schema for a list whose items all share one schema."""

    __slots__ = ("item",)

    def __init__(self, item: Schema) -> None:
        self.item = item

    def parse(self, raw: Any) -> list[Any]:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
            raise SchemaValidationError([Issue((), "Expected a list", "invalid_type")])

        issues: list[Issue] = []
        parsed: list[Any] = []
        for index, value in enumerate(raw):
            try:
                parsed.append(self.item.parse(value))
            except SchemaValidationError as exc:
                issues.extend(exc.prefixed(index).issues)
        if issues:
            raise SchemaValidationError(issues)
        return parsed

    def __repr__(self) -> str:
        return f"ListSchema({self.item!r})"
