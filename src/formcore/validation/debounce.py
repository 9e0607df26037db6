"""Debounced validation — coalesce bursts of checks into one.

An ``AsyncValidator`` owns a single pending timer. Every call cancels the
pending timer (if any) and starts a new one; when a timer fires, the core
validator runs against that call's data and resolves that call's future.

Superseded calls **never settle**. Their futures stay pending forever;
they are neither resolved nor cancelled. Only the last call in a burst
completes. Callers that await every call must not rely on the earlier
ones finishing.

Usage::

    check = create_async_validator(signup_schema, debounce_ms=250)

    async def on_keystroke(payload):
        result = await check(payload)
        render_errors(result.errors or {})

    # on teardown
    check.close()
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from formcore.config import DEFAULT_CONFIG, ValidationConfig
from formcore.errors import ConfigurationError, ValidatorClosed
from formcore.schema.protocol import Schema
from formcore.validation.core import create_validator
from formcore.validation.result import ValidationResult

logger = logging.getLogger("formcore.validation")


class AsyncValidator[T]:
    """Debounced wrapper around a schema.

    Must be called from inside a running event loop. The pending timer is
    the only resource held; ``cancel()`` drops it, ``close()`` drops it and
    refuses further calls. Also usable as a context manager::

        with create_async_validator(schema) as check:
            result = await check(data)
    """

    __slots__ = ("_closed", "_delay", "_handle", "_schema", "_validate")

    def __init__(
        self,
        schema: Schema,
        *,
        debounce_ms: float | None = None,
        config: ValidationConfig = DEFAULT_CONFIG,
    ) -> None:
        delay_ms = config.debounce_ms if debounce_ms is None else debounce_ms
        if delay_ms < 0:
            msg = f"debounce_ms must be >= 0, got {delay_ms!r}"
            raise ConfigurationError(msg)
        self._schema = schema
        self._validate = create_validator(schema, config=config)
        self._delay = delay_ms / 1000
        self._handle: asyncio.TimerHandle | None = None
        self._closed = False

    @property
    def debounce_ms(self) -> float:
        return self._delay * 1000

    @property
    def pending(self) -> bool:
        """True while a timer is scheduled and has not fired."""
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, data: Any) -> asyncio.Future[ValidationResult[T]]:
        """Schedule validation of *data*, superseding any pending call.

        Raises:
            ValidatorClosed: If ``close()`` was called.
            RuntimeError: If no event loop is running.
        """
        if self._closed:
            msg = "AsyncValidator is closed"
            raise ValidatorClosed(msg)
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Debounced call superseded; its future will not settle")
        future: asyncio.Future[ValidationResult[T]] = loop.create_future()
        self._handle = loop.call_later(self._delay, self._fire, future, data)
        return future

    def _fire(self, future: asyncio.Future[ValidationResult[T]], data: Any) -> None:
        self._handle = None
        result = self._validate(data)
        # The awaiting caller may have cancelled (e.g. wait_for timeout)
        if not future.done():
            future.set_result(result)

    def cancel(self) -> None:
        """Cancel the pending timer, if any. The validator stays usable."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        """Cancel the pending timer and refuse further calls."""
        self.cancel()
        self._closed = True

    def __enter__(self) -> AsyncValidator[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("pending" if self.pending else "idle")
        return f"AsyncValidator({self._schema!r}, debounce_ms={self.debounce_ms:g}, {state})"


def create_async_validator[T](
    schema: Schema,
    *,
    debounce_ms: float | None = None,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> AsyncValidator[T]:
    """Wrap *schema* in a debounced validator (default window: 300 ms)."""
    return AsyncValidator(schema, debounce_ms=debounce_ms, config=config)


async def validate_async[T](
    schema: Schema,
    data: Any,
    *,
    debounce_ms: float | None = None,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> ValidationResult[T]:
    """Validate *data* once after the debounce window.

    Each call builds its own validator, so concurrent ``validate_async``
    calls never supersede one another. The validator is closed on the way
    out, so cancelling the awaiting task also drops the pending timer.
    """
    with create_async_validator(schema, debounce_ms=debounce_ms, config=config) as validator:
        return await validator(data)
