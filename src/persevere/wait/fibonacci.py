r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

from persevere.wait.base import BaseWaitStrategy, check_max_delay, scale_delay


class FibonacciWait(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates delay as: base_delay * fibonacci(attempt), with an optional
    max_delay cap, where fibonacci(1) = fibonacci(2) = 1.

    The sequence (1, 1, 2, 3, 5, 8, 13, ...) grows more gradually than
    exponential backoff, which suits polling a resource that is expected
    to appear eventually.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from persevere.wait import FibonacciWait
        >>> wait = FibonacciWait(base_delay=60)
        >>> [wait.calculate(attempt) for attempt in range(1, 6)]
        [60.0, 60.0, 120.0, 180.0, 300.0]
        >>> # With max_delay cap
        >>> wait = FibonacciWait(base_delay=1.0, max_delay=10.0)
        >>> wait.calculate(11)  # fib(11) = 89, would be 89.0, but capped
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        check_max_delay(max_delay)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number, or 0 if ``n <= 0``.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        """Calculate Fibonacci delay.

        Args:
            attempt: The attempt that just completed (1-indexed).

        Returns:
            The calculated delay: base_delay * fibonacci(attempt),
            capped at max_delay if set.
        """
        return scale_delay(self.base_delay, self._fibonacci(attempt), self.max_delay)
