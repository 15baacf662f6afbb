from __future__ import annotations

import pytest

from resilience_core.circuit_breaker import Failure, Success


def test_success_exposes_value() -> None:
    result = Success(3)

    assert result.is_success is True
    assert result.is_failure is False
    assert result.error is None
    assert result.get() == 3
    assert result.get_or_else(7) == 3
    assert result.map(lambda value: value * 2) == Success(6)


def test_failure_raises_captured_error_on_get() -> None:
    error = ZeroDivisionError("division by zero")
    result = Failure(error)

    assert result.is_success is False
    assert result.is_failure is True
    assert result.get_or_else(7) == 7
    assert result.map(lambda value: value) is result
    with pytest.raises(ZeroDivisionError) as excinfo:
        result.get()
    assert excinfo.value is error


def test_callbacks_run_only_for_matching_outcome() -> None:
    seen: list[object] = []
    error = RuntimeError("nope")

    Success("ok").if_failure(seen.append).if_success(seen.append)
    Failure(error).if_success(seen.append).if_failure(seen.append)

    assert seen == ["ok", error]
