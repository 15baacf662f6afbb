"""Fluent construction of circuit breakers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resilience_core.circuit_breaker.breaker import CircuitBreaker
from resilience_core.circuit_breaker.config import CircuitBreakerConfig, Cooldown
from resilience_core.circuit_breaker.listeners import (
    TransitionListener,
    TransitionListeners,
)
from resilience_core.logging import LoggerLike

if TYPE_CHECKING:
    from resilience_core.settings import BreakerSettings


class CircuitBreakerBuilder:
    """Collect named breaker parameters and validate them on ``build``.

    Example::

        breaker = (
            CircuitBreakerBuilder.create("geocoder")
            .threshold(2)
            .cooldown(timedelta(seconds=2))
            .state_change_listener(on_transition)
            .build()
        )
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._threshold: int | None = None
        self._cooldown: Cooldown | None = None
        self._on_closed: TransitionListener | None = None
        self._on_half_open: TransitionListener | None = None
        self._on_open: TransitionListener | None = None
        self._logger: LoggerLike | None = None

    @classmethod
    def create(cls, name: str | None = None) -> CircuitBreakerBuilder:
        return cls(name)

    @classmethod
    def from_settings(cls, settings: BreakerSettings) -> CircuitBreakerBuilder:
        """Seed a builder with the name, threshold and cooldown from settings."""
        return (
            cls(settings.name)
            .threshold(settings.threshold)
            .cooldown(settings.cooldown_ms)
        )

    def threshold(self, threshold: int) -> CircuitBreakerBuilder:
        self._threshold = threshold
        return self

    def cooldown(self, cooldown: Cooldown) -> CircuitBreakerBuilder:
        """Set the cooldown as int milliseconds or a ``timedelta``."""
        self._cooldown = cooldown
        return self

    def timeout(self, timeout: Cooldown) -> CircuitBreakerBuilder:
        """Alias of ``cooldown``."""
        return self.cooldown(timeout)

    def state_change_listener(
        self, listener: TransitionListener
    ) -> CircuitBreakerBuilder:
        """Fire ``listener`` on every transition.

        Replaces any target-specific listener set earlier.
        """
        self._on_closed = listener
        self._on_half_open = listener
        self._on_open = listener
        return self

    def to_closed_state_listener(
        self, listener: TransitionListener
    ) -> CircuitBreakerBuilder:
        self._on_closed = listener
        return self

    def to_half_open_state_listener(
        self, listener: TransitionListener
    ) -> CircuitBreakerBuilder:
        self._on_half_open = listener
        return self

    def to_open_state_listener(
        self, listener: TransitionListener
    ) -> CircuitBreakerBuilder:
        self._on_open = listener
        return self

    def logger(self, logger: LoggerLike) -> CircuitBreakerBuilder:
        self._logger = logger
        return self

    def build(self) -> CircuitBreaker:
        """Validate collected parameters and return a ``CLOSED`` breaker.

        Raises:
            ValueError: When threshold or cooldown is missing or invalid.
        """
        if self._threshold is None:
            raise ValueError("threshold is required")
        if self._cooldown is None:
            raise ValueError("cooldown is required")
        return CircuitBreaker(
            CircuitBreakerConfig(threshold=self._threshold, cooldown=self._cooldown),
            name=self._name,
            listeners=TransitionListeners(
                on_closed=self._on_closed,
                on_half_open=self._on_half_open,
                on_open=self._on_open,
            ),
            logger=self._logger,
        )
