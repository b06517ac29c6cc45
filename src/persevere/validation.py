r"""Parameter validation utilities for the executors.

This module provides validation functions to ensure the parameters given
to the executors meet the required constraints before any attempt is made.
"""

from __future__ import annotations

__all__ = ["validate_max_attempts", "validate_operation"]

from typing import Any


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: The maximum number of attempts, inclusive.
            Must be an integer >= 1.

    Raises:
        TypeError: If ``max_attempts`` is not an integer.
        ValueError: If ``max_attempts`` is lower than 1.

    Example:
        ```pycon
        >>> from persevere.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {type(max_attempts).__name__}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)


def validate_operation(operation: Any) -> None:
    """Validate that the operation can be invoked.

    Args:
        operation: The zero-argument operation to execute.

    Raises:
        TypeError: If ``operation`` is not callable.
    """
    if not callable(operation):
        msg = f"operation must be callable, got {type(operation).__name__}"
        raise TypeError(msg)
