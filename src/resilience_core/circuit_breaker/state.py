"""Circuit breaker state primitives."""

from dataclasses import dataclass
from enum import StrEnum


class CircuitState(StrEnum):
    """Circuit breaker state values."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


@dataclass(frozen=True, slots=True)
class StateRecord:
    """Current logical state of one breaker.

    A fresh record replaces the previous one on every transition. Only
    ``OPEN`` carries data: the monotonic timestamp it was entered at.
    """

    state: CircuitState
    entered_at: float | None = None

    @classmethod
    def closed(cls) -> "StateRecord":
        return cls(CircuitState.CLOSED)

    @classmethod
    def half_open(cls) -> "StateRecord":
        return cls(CircuitState.HALF_OPEN)

    @classmethod
    def open(cls, entered_at: float) -> "StateRecord":
        return cls(CircuitState.OPEN, entered_at=entered_at)


@dataclass(frozen=True)
class BreakerSnapshot:
    """Point-in-time view of breaker internals useful for metrics/logging.

    Attributes:
        name: Breaker name, if any.
        state: Breaker state at the time of the snapshot.
        failure_count: Consecutive failures counted while ``CLOSED``.
        threshold_reached: Whether ``failure_count`` has reached the threshold.
        last_failure: Failure captured by the most recent attempt, if any.
        retry_after: Seconds until a probe is admitted while ``OPEN``, else 0.
    """

    name: str | None
    state: CircuitState
    failure_count: int
    threshold_reached: bool
    last_failure: BaseException | None
    retry_after: float
