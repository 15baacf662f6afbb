"""Circuit breaker exceptions.

Callers can distinguish between:
  - A call being rejected because the circuit is open (``CircuitOpenError``).
  - The protected operation's own failure, which is returned unchanged.
"""


class CircuitBreakerError(Exception):
    """Base exception for the circuit breaker package."""


class CircuitOpenError(CircuitBreakerError):
    """Returned when a call is rejected because the circuit is open.

    Attributes:
        breaker_name: Name of the breaker rejecting the call, if any.
        last_failure: Failure that is still recorded as the most recent one,
            or ``None`` when the breaker was opened manually.
        retry_after: Seconds until a half-open probe may be attempted.
    """

    def __init__(
        self,
        breaker_name: str | None,
        last_failure: BaseException | None,
        retry_after: float,
    ) -> None:
        """Initialize a circuit-open exception payload.

        Args:
            breaker_name: Breaker rejecting the call.
            last_failure: Underlying failure that caused the circuit to open.
            retry_after: Seconds until the next probe window opens.
        """
        self.breaker_name = breaker_name
        self.last_failure = last_failure
        self.retry_after = retry_after
        label = breaker_name if breaker_name is not None else "<unnamed>"
        super().__init__(f"circuit_open: {label} retry_after={retry_after:g}s")
        self.__cause__ = last_failure
