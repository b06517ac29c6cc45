r"""Exceptions raised by the executors.

The executors only ever let three outcomes escape ``execute``: the value
returned by the operation, the operation's own terminal exception
(propagated unmodified), or an ``ExhaustedError`` synthesized when the retry
budget ran out while the outcomes were still transient.
"""

from __future__ import annotations

__all__ = ["ExecutorError", "ExhaustedError"]


class ExecutorError(RuntimeError):
    """Base class for the errors raised by the executors themselves."""


class ExhaustedError(ExecutorError):
    """Raised when the attempts or the time budget are exhausted.

    This error is only raised when every attempt produced a transient
    outcome. It is distinct from the operation's own failures so callers
    can tell "gave up after retrying" apart from "failed outright".

    Args:
        message: A descriptive error message.
        attempts: The number of attempts performed.
        elapsed: The time in seconds since the first attempt started.
        cause: The last transient exception, or ``None`` if the last
            attempt returned a retryable value.
        last_value: The last retryable value returned by the operation,
            if any.

    Example:
        ```pycon
        >>> from persevere.exceptions import ExhaustedError
        >>> error = ExhaustedError("gave up", attempts=3, elapsed=1.5)
        >>> error.attempts
        3
        >>> error.cause is None
        True

        ```
    """

    def __init__(
        self,
        message: str,
        attempts: int,
        elapsed: float,
        cause: BaseException | None = None,
        last_value: object = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attempts = attempts
        self.elapsed = elapsed
        self.cause = cause
        self.last_value = last_value
