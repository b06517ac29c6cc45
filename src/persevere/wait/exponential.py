r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

from persevere.wait.base import BaseWaitStrategy, check_max_delay, scale_delay


class ExponentialWait(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates delay as: base_delay * 2 ** (attempt - 1), with an optional
    max_delay cap. The delay doubles after each attempt.

    Args:
        base_delay: The delay in seconds after the first attempt
            (default: 1.0).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from persevere.wait import ExponentialWait
        >>> wait = ExponentialWait(base_delay=1.0)
        >>> [wait.calculate(attempt) for attempt in range(1, 5)]
        [1.0, 2.0, 4.0, 8.0]
        >>> # With max_delay cap
        >>> wait = ExponentialWait(base_delay=1.0, max_delay=5.0)
        >>> wait.calculate(11)  # Would be 1024.0, but capped
        5.0

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

    def calculate(self, attempt: int) -> float:
        """Calculate exponential delay.

        Args:
            attempt: The attempt that just completed (1-indexed).

        Returns:
            The calculated delay: base_delay * 2 ** (attempt - 1),
            capped at max_delay if set.
        """
        return scale_delay(self.base_delay, 2 ** max(attempt - 1, 0), self.max_delay)
