from __future__ import annotations

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resilience_core.circuit_breaker.config import CircuitBreakerConfig
from resilience_core.logging import configure_structlog, get_log_level_value

BREAKER_ENV_PREFIX = "CIRCUIT_BREAKER_"


def prefixed_settings_config(prefix: str) -> SettingsConfigDict:
    """Build standard Pydantic settings config for prefixed environments."""
    return SettingsConfigDict(env_prefix=prefix, case_sensitive=False)


class BreakerSettings(BaseSettings):
    """Environment-driven settings for one circuit breaker.

    Read from ``CIRCUIT_BREAKER_THRESHOLD``, ``CIRCUIT_BREAKER_COOLDOWN_MS``
    and friends unless a subclass overrides ``model_config``.
    """

    model_config = prefixed_settings_config(BREAKER_ENV_PREFIX)

    name: str | None = None
    threshold: int
    cooldown_ms: int
    log_level: str = "INFO"

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        normalized = value.strip()
        return normalized or None

    @field_validator("threshold")
    @classmethod
    def _validate_threshold(cls, value: int) -> int:
        if value < 1:
            raise ValueError("threshold must be >= 1")
        return value

    @field_validator("cooldown_ms")
    @classmethod
    def _validate_cooldown_ms(cls, value: int) -> int:
        if value < 1:
            raise ValueError("cooldown_ms must be >= 1")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        get_log_level_value(value)
        return value.strip().upper()

    def breaker_config(self) -> CircuitBreakerConfig:
        """Build the breaker configuration described by these settings."""
        return CircuitBreakerConfig(
            threshold=self.threshold,
            cooldown=self.cooldown_ms,
        )

    def configure_logging(self) -> structlog.stdlib.BoundLogger:
        """Configure structlog and stdlib logging at ``log_level``."""
        return configure_structlog(log_level=self.log_level)
