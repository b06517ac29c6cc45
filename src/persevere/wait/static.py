r"""Static wait strategy."""

from __future__ import annotations

__all__ = ["StaticWait"]

from persevere.wait.base import BaseWaitStrategy


class StaticWait(BaseWaitStrategy):
    """Constant wait strategy.

    Returns the same delay after every attempt, regardless of the attempt
    number.

    Args:
        delay: The fixed delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from persevere.wait import StaticWait
        >>> wait = StaticWait(delay=2.5)
        >>> wait.calculate(1)
        2.5
        >>> wait.calculate(10)
        2.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
