r"""Outcome types exchanged between operations, classifier and executor.

An operation may return a plain value, or make its intent explicit by
returning one of:

- ``Ready(value)``: the work is done, ``value`` is the result.
- ``NotYetAvailable(reason)``: nothing to return yet, try again later.
- ``Failed(error)``: the attempt failed with ``error``; it is classified
  exactly as if the operation had raised it.

The classifier turns the raw outcome of one attempt into an
``ExecutionResult``, which is one of ``Success``, ``Retryable`` or
``Terminal``.

Example:
    ```pycon
    >>> from persevere.outcome import NotYetAvailable, Ready
    >>> def poll():
    ...     return NotYetAvailable("feed not updated")
    ...
    >>> poll()
    NotYetAvailable(reason='feed not updated')
    >>> Ready(42).value
    42

    ```
"""

from __future__ import annotations

__all__ = [
    "ExecutionResult",
    "Failed",
    "NotYetAvailable",
    "Ready",
    "Retryable",
    "Success",
    "Terminal",
]

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ready:
    """The operation produced its result.

    Attributes:
        value: The result returned to the caller of ``execute``.
    """

    value: Any


@dataclass(frozen=True)
class NotYetAvailable:
    """The operation has nothing to return yet and should be retried.

    Attributes:
        reason: A short human readable description.
    """

    reason: str = "not yet available"


@dataclass(frozen=True)
class Failed:
    """The operation failed with ``error`` without raising it."""

    error: BaseException


@dataclass(frozen=True)
class Success:
    """Accepted outcome; ``value`` is returned to the caller."""

    value: Any


@dataclass(frozen=True)
class Retryable:
    """Transient outcome that triggers another attempt.

    Attributes:
        reason: Why the outcome is considered transient.
        cause: The transient exception, if the attempt failed with one.
        value: The retryable value, if the attempt returned one.
    """

    reason: str
    cause: BaseException | None = None
    value: Any = None


@dataclass(frozen=True)
class Terminal:
    """Non-retryable failure; ``error`` is raised to the caller as is."""

    error: BaseException


ExecutionResult = Union[Success, Retryable, Terminal]
