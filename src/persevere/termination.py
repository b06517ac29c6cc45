r"""Termination strategies imposing a stopping bound on the retry loop.

A termination strategy is a pure predicate over the attempt that just
completed and the time elapsed since the first attempt started. The
executor measures the elapsed time itself, so a strategy holds no per-call
state and one instance can be shared by any number of executors.

The ``max_attempts`` argument of ``execute`` is a separate, hard cap.
Both bounds apply together: whichever fires first wins.
"""

from __future__ import annotations

__all__ = [
    "AttemptBoundTermination",
    "BaseTerminationStrategy",
    "NoTermination",
    "TimeBoundTermination",
]

from abc import ABC, abstractmethod


class BaseTerminationStrategy(ABC):
    """Abstract base class for termination strategies."""

    @abstractmethod
    def should_stop(self, attempt: int, elapsed: float) -> bool:
        """Indicate if the retry loop must stop.

        Args:
            attempt: The attempt that just completed (1-indexed).
            elapsed: The time in seconds since the first attempt started.

        Returns:
            ``True`` if no further attempt may start, otherwise ``False``.
        """


class NoTermination(BaseTerminationStrategy):
    """Never stop; only ``max_attempts`` bounds the loop.

    Example:
        ```pycon
        >>> from persevere.termination import NoTermination
        >>> NoTermination().should_stop(attempt=1000, elapsed=1e9)
        False

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return False


class TimeBoundTermination(BaseTerminationStrategy):
    """Stop once the elapsed time reaches a budget.

    Args:
        budget: The time budget in seconds. Must be > 0.

    Example:
        ```pycon
        >>> from persevere.termination import TimeBoundTermination
        >>> strategy = TimeBoundTermination(budget=5.0)
        >>> strategy.should_stop(attempt=1, elapsed=4.9)
        False
        >>> strategy.should_stop(attempt=1, elapsed=5.0)
        True

        ```
    """

    def __init__(self, budget: float) -> None:
        if budget <= 0:
            msg = f"budget must be > 0, got {budget}"
            raise ValueError(msg)
        self.budget = budget

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(budget={self.budget})"

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return elapsed >= self.budget


class AttemptBoundTermination(BaseTerminationStrategy):
    """Stop after a fixed number of attempts.

    Args:
        max_attempts: The number of attempts after which the loop stops.
            Must be >= 1.

    Example:
        ```pycon
        >>> from persevere.termination import AttemptBoundTermination
        >>> strategy = AttemptBoundTermination(max_attempts=3)
        >>> strategy.should_stop(attempt=2, elapsed=0.0)
        False
        >>> strategy.should_stop(attempt=3, elapsed=0.0)
        True

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"

    def should_stop(self, attempt: int, elapsed: float) -> bool:  # noqa: ARG002
        return attempt >= self.max_attempts
