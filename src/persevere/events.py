r"""Lifecycle events emitted by the executors.

Subscribers receive one of these events for each step of the retry loop:

- ``AttemptStarted``: before each attempt
- ``AttemptFailed``: after an attempt produced a transient outcome
- ``Waiting``: before sleeping between two attempts
- ``GivingUp``: when the loop stops without a result
- ``Succeeded``: when an attempt produced an accepted result

All attempt numbers are 1-indexed.

Example:
    ```pycon
    >>> from persevere.events import Waiting
    >>> event = Waiting(attempt=1, max_attempts=3, delay=2.0)
    >>> event.delay
    2.0

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptFailed",
    "AttemptStarted",
    "ExecutionEvent",
    "GivingUp",
    "Succeeded",
    "Waiting",
]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExecutionEvent:
    """Base class of all lifecycle events.

    Attributes:
        attempt: The attempt number the event refers to (1-indexed).
        max_attempts: The maximum number of attempts of the call.
    """

    attempt: int
    max_attempts: int


@dataclass(frozen=True)
class AttemptStarted(ExecutionEvent):
    """Emitted before each attempt."""


@dataclass(frozen=True)
class AttemptFailed(ExecutionEvent):
    """Emitted when an attempt produced a transient outcome.

    Attributes:
        reason: Why the outcome is considered transient.
        cause: The transient exception, if any.
        value: The retryable value returned by the operation, if any.
    """

    reason: str
    cause: BaseException | None = None
    value: Any = None


@dataclass(frozen=True)
class Waiting(ExecutionEvent):
    """Emitted before sleeping between two attempts.

    Attributes:
        delay: The time in seconds the executor is about to sleep. The
            ``attempt`` field is the attempt that just completed.
    """

    delay: float


@dataclass(frozen=True)
class GivingUp(ExecutionEvent):
    """Emitted when the loop stops without a result.

    Attributes:
        cause: The exception about to be raised to the caller. For an
            exhausted budget it is the ``ExhaustedError``; for a terminal
            failure it is the operation's own exception.
        elapsed: Time in seconds since the first attempt started.
        exhausted: ``True`` if the attempts or the time budget ran out,
            ``False`` if the operation failed with a terminal error.
    """

    cause: BaseException
    elapsed: float
    exhausted: bool


@dataclass(frozen=True)
class Succeeded(ExecutionEvent):
    """Emitted when an attempt produced an accepted result.

    Attributes:
        result: The value returned to the caller.
        elapsed: Time in seconds since the first attempt started.
    """

    result: Any
    elapsed: float
