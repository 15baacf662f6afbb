"""Core circuit breaker implementation."""

import logging
import threading
import time
from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import ParamSpec, TypeVar

from resilience_core.circuit_breaker.config import CircuitBreakerConfig
from resilience_core.circuit_breaker.exceptions import CircuitOpenError
from resilience_core.circuit_breaker.listeners import TransitionListeners
from resilience_core.circuit_breaker.result import Failure, Result, Success
from resilience_core.circuit_breaker.state import (
    BreakerSnapshot,
    CircuitState,
    StateRecord,
)
from resilience_core.logging import LoggerLike, log_info

T = TypeVar("T")
P = ParamSpec("P")

_logger = logging.getLogger(__name__)


def _monotonic() -> float:
    return time.monotonic()


class CircuitBreaker:
    """Thread-safe guard around a fallible, potentially slow operation.

    All reads and writes of the state, the failure counter and the last
    observed failure happen under one lock, and listeners fire under it too.
    The protected operation itself always runs outside the lock, so several
    callers may be admitted while ``HALF_OPEN``.
    """

    def __init__(
        self,
        config: CircuitBreakerConfig,
        *,
        name: str | None = None,
        listeners: TransitionListeners | None = None,
        logger: LoggerLike | None = None,
    ) -> None:
        """Build a breaker that starts ``CLOSED``.

        Args:
            config: Validated threshold and cooldown.
            name: Optional label used in diagnostics and rejection errors.
            listeners: Optional transition callbacks.
            logger: Destination for transition events. Defaults to this
                module's stdlib logger.
        """
        self._config = config
        self._name = name
        self._listeners = TransitionListeners() if listeners is None else listeners
        self._logger = _logger if logger is None else logger
        self._lock = threading.Lock()
        self._record = StateRecord.closed()
        self._failure_count = 0
        self._last_failure: BaseException | None = None

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def config(self) -> CircuitBreakerConfig:
        return self._config

    @property
    def threshold(self) -> int:
        return self._config.threshold

    @property
    def cooldown(self) -> timedelta:
        return self._config.cooldown

    @property
    def timeout(self) -> int:
        """Cooldown in milliseconds."""
        return self._config.cooldown_ms

    @property
    def failure_count(self) -> int:
        with self._lock:
            return self._failure_count

    @property
    def failure_from_last_attempt(self) -> BaseException | None:
        """Failure of the last completed attempt, or ``None`` if it succeeded.

        A rejected attempt leaves the failure that opened the circuit in place.
        """
        with self._lock:
            return self._last_failure

    # Transitions and per-state hooks. Callers hold ``self._lock``.

    def _move_to(self, record: StateRecord) -> None:
        old = self._record.state
        self._record = record
        if record.state == CircuitState.CLOSED:
            self._failure_count = 0
        log_info(
            self._logger,
            "circuit_breaker.state_changed",
            breaker=self._name,
            old=old.value,
            new=record.state.value,
            failure_count=self._failure_count,
        )
        listener = self._listeners.for_state(record.state)
        if listener is not None:
            listener()

    def _cooldown_elapsed(self, record: StateRecord) -> bool:
        if record.entered_at is None:
            return True
        return _monotonic() - record.entered_at >= self._config.cooldown_seconds

    def _refresh(self) -> StateRecord:
        record = self._record
        if record.state == CircuitState.OPEN and self._cooldown_elapsed(record):
            self._move_to(StateRecord.half_open())
        return self._record

    def _may_run(self) -> bool:
        match self._refresh().state:
            case CircuitState.OPEN:
                return False
            case CircuitState.CLOSED | CircuitState.HALF_OPEN:
                return True

    def _on_success(self) -> None:
        match self._record.state:
            case CircuitState.HALF_OPEN:
                self._move_to(StateRecord.closed())
            case CircuitState.CLOSED | CircuitState.OPEN:
                pass

    def _on_failure(self) -> None:
        match self._record.state:
            case CircuitState.CLOSED:
                self._failure_count += 1
                if self._failure_count >= self._config.threshold:
                    self._move_to(StateRecord.open(_monotonic()))
            case CircuitState.HALF_OPEN:
                self._move_to(StateRecord.open(_monotonic()))
            case CircuitState.OPEN:
                pass

    def _retry_after(self) -> float:
        record = self._record
        if record.state != CircuitState.OPEN or record.entered_at is None:
            return 0.0
        elapsed = _monotonic() - record.entered_at
        return max(self._config.cooldown_seconds - elapsed, 0.0)

    # Attempt protocol.

    def _admit(self) -> CircuitOpenError | None:
        with self._lock:
            if not self._may_run():
                return CircuitOpenError(
                    self._name,
                    self._last_failure,
                    retry_after=self._retry_after(),
                )
            self._last_failure = None
            return None

    def _record_success(self) -> None:
        with self._lock:
            self._on_success()

    def _record_failure(self, exc: Exception) -> None:
        with self._lock:
            self._last_failure = exc
            self._on_failure()

    def attempt(
        self,
        operation: Callable[P, T],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[T]:
        """Invoke ``operation`` under circuit breaker protection.

        Args:
            operation: Dangerous callable to execute at most once.
            *args: Positional arguments forwarded to ``operation``.
            **kwargs: Keyword arguments forwarded to ``operation``.

        Returns:
            ``Success`` with the operation's value, ``Failure`` with the
            operation's exception, or ``Failure`` with a ``CircuitOpenError``
            when the circuit is open and the operation was not invoked.
        """
        rejection = self._admit()
        if rejection is not None:
            return Failure(rejection)

        try:
            value = operation(*args, **kwargs)
        except Exception as exc:
            self._record_failure(exc)
            return Failure(exc)

        self._record_success()
        return Success(value)

    async def attempt_async(
        self,
        operation: Callable[P, Awaitable[T]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[T]:
        """Await an async ``operation`` under circuit breaker protection.

        Same protocol as ``attempt``. The lock is only held for admission and
        outcome recording, never across the ``await``.
        """
        rejection = self._admit()
        if rejection is not None:
            return Failure(rejection)

        try:
            value = await operation(*args, **kwargs)
        except Exception as exc:
            self._record_failure(exc)
            return Failure(exc)

        self._record_success()
        return Success(value)

    # Manual control.

    def open(self) -> None:
        """Force ``OPEN`` from any state and restart the cooldown."""
        with self._lock:
            self._move_to(StateRecord.open(_monotonic()))

    def close(self) -> None:
        """Force ``CLOSED`` from any state and reset the failure count."""
        with self._lock:
            self._move_to(StateRecord.closed())

    # Status queries. Each may promote an expired ``OPEN`` to ``HALF_OPEN``.

    @property
    def state(self) -> CircuitState:
        with self._lock:
            return self._refresh().state

    def is_closed(self) -> bool:
        return self.state == CircuitState.CLOSED

    def is_half_open(self) -> bool:
        return self.state == CircuitState.HALF_OPEN

    def is_open(self) -> bool:
        return self.state == CircuitState.OPEN

    def is_threshold_reached(self) -> bool:
        with self._lock:
            return self._failure_count >= self._config.threshold

    def snapshot(self) -> BreakerSnapshot:
        """Return a consistent view of the breaker for metrics or logging."""
        with self._lock:
            record = self._refresh()
            return BreakerSnapshot(
                name=self._name,
                state=record.state,
                failure_count=self._failure_count,
                threshold_reached=self._failure_count >= self._config.threshold,
                last_failure=self._last_failure,
                retry_after=self._retry_after(),
            )
