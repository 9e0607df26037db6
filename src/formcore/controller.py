"""Form state controller — values, errors, and submission status for one form.

``FormController`` owns a form's state and drives the validators on the
events a UI produces: value edits, submit, reset. It renders nothing; a UI
layer reads ``controller.state`` or subscribes to changes::

    form = FormController(
        signup_schema,
        initial_values={"email": ""},
        on_submit=create_account,
    )
    unsubscribe = form.subscribe(lambda state: render(state))

    form.set_value("email", "ana@example.com")
    await form.handle_submit(event)

Lifecycle::

    IDLE -> VALIDATING -> SUBMITTING -> IDLE

``VALIDATING`` is transient (inside ``validate()``/``handle_submit()``);
``SUBMITTING`` lasts while ``on_submit`` runs. There is no terminal state.

Every mutation swaps in a new mapping rather than editing one in place,
so listeners and ``state`` snapshots never see a half-applied update.
"""

from __future__ import annotations

import copy
import enum
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from formcore.config import DEFAULT_CONFIG, ValidationConfig
from formcore.schema.protocol import Schema
from formcore.validation.form import validate_field, validate_form
from formcore.validation.result import FieldError

logger = logging.getLogger("formcore.controller")

type SubmitHandler = Callable[[Any], Awaitable[None] | None]
type StateListener = Callable[[FormState], None]


class SubmitEvent(Protocol):
    """Anything with a default action to suppress, such as a DOM submit event."""

    def prevent_default(self) -> None: ...


class FormPhase(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


@dataclass(frozen=True, slots=True)
class FormState:
    """Immutable snapshot of a controller's state."""

    values: Mapping[str, Any] = field(default_factory=dict)
    errors: Mapping[str, FieldError] = field(default_factory=dict)
    is_submitting: bool = False
    phase: FormPhase = FormPhase.IDLE

    @property
    def is_valid(self) -> bool:
        """True when no errors are recorded (not a fresh validation)."""
        return not self.errors


class FormController:
    """Stateful façade over ``validate_form``/``validate_field`` for one form.

    Args:
        schema: Schema for the whole form. Field-level checks need it to
            expose ``field_schema()``; without it they always pass.
        initial_values: Starting values, restored by ``reset()``.
        on_submit: Called with the parsed payload after a successful
            ``validate()``. May be sync or async.
        config: Validation configuration (general error key, messages).
    """

    __slots__ = (
        "_config",
        "_errors",
        "_initial_values",
        "_is_submitting",
        "_listeners",
        "_on_submit",
        "_phase",
        "_schema",
        "_values",
    )

    def __init__(
        self,
        schema: Schema,
        *,
        initial_values: Mapping[str, Any] | None = None,
        on_submit: SubmitHandler | None = None,
        config: ValidationConfig = DEFAULT_CONFIG,
    ) -> None:
        self._schema = schema
        self._on_submit = on_submit
        self._config = config
        self._initial_values: dict[str, Any] = copy.deepcopy(dict(initial_values or {}))
        self._values: dict[str, Any] = copy.deepcopy(self._initial_values)
        self._errors: dict[str, FieldError] = {}
        self._is_submitting = False
        self._phase = FormPhase.IDLE
        self._listeners: list[StateListener] = []

    # -- State ---------------------------------------------------------------

    @property
    def values(self) -> dict[str, Any]:
        return copy.deepcopy(self._values)

    @property
    def errors(self) -> dict[str, FieldError]:
        return dict(self._errors)

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def state(self) -> FormState:
        return FormState(
            values=copy.deepcopy(self._values),
            errors=dict(self._errors),
            is_submitting=self._is_submitting,
            phase=self._phase,
        )

    # -- Subscription --------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with a fresh ``FormState`` after every change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Form state listener %r failed", listener)

    # -- Operations ----------------------------------------------------------

    def set_value(self, name: str, value: Any) -> None:
        """Store *value* and clear any error recorded for *name*.

        The value is deep-copied, so later changes to the caller's object
        do not reach the form. It is not re-validated; the error stays
        cleared until the next explicit validation.
        """
        self._values = {**self._values, name: copy.deepcopy(value)}
        if name in self._errors:
            self._errors = {k: v for k, v in self._errors.items() if k != name}
        self._notify()

    def set_error(self, name: str, error: FieldError | None) -> None:
        """Set or clear (``None``) the error for *name*, e.g. from a server response."""
        if error is None:
            self._errors = {k: v for k, v in self._errors.items() if k != name}
        else:
            self._errors = {**self._errors, name: error}
        self._notify()

    def validate(self) -> bool:
        """Validate all current values; replace the error mapping with the outcome."""
        previous = self._phase
        self._phase = FormPhase.VALIDATING
        try:
            result = validate_form(self._schema, self._values, config=self._config)
        finally:
            self._phase = previous
        self._errors = result.errors_for_display(self._config.general_key)
        self._notify()
        return result.is_valid

    def validate_field(self, name: str) -> bool:
        """Validate the current value of *name* alone and record the outcome."""
        error = validate_field(self._schema, name, self._values.get(name), config=self._config)
        self.set_error(name, error)
        return error is None

    async def handle_submit(self, event: SubmitEvent | None = None) -> None:
        """Validate and, if valid, pass the parsed values to ``on_submit``.

        An invalid form stops here with its errors recorded. Exceptions
        from ``on_submit`` are logged and not re-raised; ``is_submitting``
        is cleared whatever happens.
        """
        if event is not None:
            event.prevent_default()

        if not self.validate():
            return

        self._is_submitting = True
        self._phase = FormPhase.SUBMITTING
        self._notify()
        try:
            payload = self._schema.parse(self._values)
            if self._on_submit is not None:
                result = self._on_submit(payload)
                if inspect.isawaitable(result):
                    await result
        except Exception:
            logger.warning("Form submit handler failed", exc_info=True)
        finally:
            self._is_submitting = False
            self._phase = FormPhase.IDLE
            self._notify()

    def reset(self) -> None:
        """Restore the initial values and clear errors and submission status."""
        self._values = copy.deepcopy(self._initial_values)
        self._errors = {}
        self._is_submitting = False
        self._phase = FormPhase.IDLE
        self._notify()

    def __repr__(self) -> str:
        return (
            f"FormController({self._schema!r}, phase={self._phase.value}, "
            f"errors={len(self._errors)}, submitting={self._is_submitting})"
        )
