"""Transition hooks for circuit breakers."""

from collections.abc import Callable
from dataclasses import dataclass

from resilience_core.circuit_breaker.state import CircuitState

TransitionListener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class TransitionListeners:
    """Optional zero-argument callbacks fired on actual state transitions.

    Notes:
        Listeners run synchronously while the breaker lock is held, in the
        thread that triggered the transition. A listener must not call back
        into the same breaker.
    """

    on_closed: TransitionListener | None = None
    on_half_open: TransitionListener | None = None
    on_open: TransitionListener | None = None

    @classmethod
    def uniform(cls, listener: TransitionListener) -> "TransitionListeners":
        """Fire ``listener`` on every transition regardless of target state."""
        return cls(on_closed=listener, on_half_open=listener, on_open=listener)

    def for_state(self, state: CircuitState) -> TransitionListener | None:
        match state:
            case CircuitState.CLOSED:
                return self.on_closed
            case CircuitState.HALF_OPEN:
                return self.on_half_open
            case CircuitState.OPEN:
                return self.on_open
