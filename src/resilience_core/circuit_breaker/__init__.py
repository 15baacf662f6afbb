"""Thread-safe in-process circuit breaker.

This package implements the circuit breaker pattern from *Release It!*.

Key behavior notes:
  - ``attempt`` never raises for a failing or rejected call; it returns a
    ``Success`` or ``Failure`` result. Rejections carry ``CircuitOpenError``.
  - ``OPEN`` becomes ``HALF_OPEN`` lazily: the first status query or attempt
    after the cooldown performs the promotion. No background timer exists.
  - Half-open probing is advisory only: concurrent callers may all be admitted
    while ``HALF_OPEN``. Each outcome is recorded against the state that is
    current when the call completes.
  - Only consecutive failures while ``CLOSED`` are counted, and a success while
    ``CLOSED`` does not reset the counter.
"""

from resilience_core.circuit_breaker.breaker import CircuitBreaker
from resilience_core.circuit_breaker.builder import CircuitBreakerBuilder
from resilience_core.circuit_breaker.config import CircuitBreakerConfig
from resilience_core.circuit_breaker.exceptions import (
    CircuitBreakerError,
    CircuitOpenError,
)
from resilience_core.circuit_breaker.listeners import (
    TransitionListener,
    TransitionListeners,
)
from resilience_core.circuit_breaker.result import Failure, Result, Success
from resilience_core.circuit_breaker.state import BreakerSnapshot, CircuitState

__all__ = [
    "BreakerSnapshot",
    "CircuitBreaker",
    "CircuitBreakerBuilder",
    "CircuitBreakerConfig",
    "CircuitBreakerError",
    "CircuitOpenError",
    "CircuitState",
    "Failure",
    "Result",
    "Success",
    "TransitionListener",
    "TransitionListeners",
]
