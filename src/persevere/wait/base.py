r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

import math
from abc import ABC, abstractmethod


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long the executor sleeps before the
    next attempt. Implementations must be pure: the same attempt number
    always yields the same delay, and no state is carried between calls.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay to wait after a given attempt.

        Args:
            attempt: The attempt that just completed (1-indexed). The
                delay before attempt ``k + 1`` is computed with ``k``.

        Returns:
            The delay in seconds, always ``>= 0``.
        """


def check_max_delay(max_delay: float | None) -> None:
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def scale_delay(base_delay: float, factor: int, max_delay: float | None) -> float:
    """Compute ``base_delay * factor`` capped at ``max_delay``.

    The cap is checked before the integer factor is converted to a float,
    so large attempt numbers return ``max_delay`` instead of overflowing.
    Without a cap, a delay beyond the float range is ``math.inf``.

    Args:
        base_delay: The base delay in seconds.
        factor: The non-negative growth factor of the attempt.
        max_delay: Optional maximum delay cap in seconds.

    Returns:
        The delay in seconds.
    """
    if base_delay == 0 or factor == 0:
        return 0.0
    if max_delay is not None and factor >= max_delay / base_delay:
        return float(max_delay)
    try:
        return float(base_delay * factor)
    except OverflowError:
        return math.inf
