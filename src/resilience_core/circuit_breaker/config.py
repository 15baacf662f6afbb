"""Circuit breaker configuration."""

from dataclasses import dataclass
from datetime import timedelta

Cooldown = int | timedelta


def to_milliseconds(cooldown: Cooldown) -> int:
    """Normalize a cooldown given as raw milliseconds or a ``timedelta``."""
    if isinstance(cooldown, timedelta):
        return int(cooldown / timedelta(milliseconds=1))
    if isinstance(cooldown, bool) or not isinstance(cooldown, int):
        raise TypeError("cooldown must be int milliseconds or a timedelta")
    return cooldown


@dataclass(frozen=True, slots=True, init=False)
class CircuitBreakerConfig:
    """Circuit breaker configuration values.

    Attributes:
        threshold: Consecutive failures required while ``CLOSED`` before opening.
        cooldown_ms: Milliseconds to stay ``OPEN`` before admitting a probe.
    """

    threshold: int
    cooldown_ms: int

    def __init__(self, threshold: int, cooldown: Cooldown) -> None:
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise TypeError("threshold must be an int")
        object.__setattr__(self, "threshold", threshold)
        object.__setattr__(self, "cooldown_ms", to_milliseconds(cooldown))
        if self.threshold < 1:
            raise ValueError("threshold must be >= 1")
        if self.cooldown_ms < 1:
            raise ValueError("cooldown must be >= 1ms")

    @property
    def cooldown(self) -> timedelta:
        return timedelta(milliseconds=self.cooldown_ms)

    @property
    def cooldown_seconds(self) -> float:
        return self.cooldown_ms / 1000
