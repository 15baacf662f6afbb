from __future__ import annotations


class FakeLogger:
    """Capture structured logger events for assertions."""

    def __init__(self) -> None:
        self.events: list[str] = []
        self.calls: list[tuple[str, str, dict[str, object]]] = []

    def _record(self, level: str, event: str, **kwargs: object) -> None:
        self.events.append(event)
        self.calls.append((level, event, kwargs))

    def info(self, event: str, **kwargs: object) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs: object) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: object) -> None:
        self._record("error", event, **kwargs)

    def exception(self, event: str, **kwargs: object) -> None:
        self._record("exception", event, **kwargs)

    def transitions(self) -> list[tuple[object, object]]:
        return [
            (fields["old"], fields["new"])
            for _, event, fields in self.calls
            if event == "circuit_breaker.state_changed"
        ]


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self._now_ms = start_ms

    def monotonic(self) -> float:
        return self._now_ms / 1000

    def advance_ms(self, milliseconds: int) -> None:
        self._now_ms += milliseconds


class Counter:
    """Zero-argument callable that counts its invocations."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1
