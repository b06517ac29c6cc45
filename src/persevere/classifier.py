r"""Retry classification of the outcome of one attempt.

This module provides the ``RetryClassifier`` class that decides whether
the outcome of one attempt (a returned value or a raised exception) is a
success, a transient outcome that triggers another attempt, or a terminal
failure. Classification has no memory of previous attempts.
"""

from __future__ import annotations

__all__ = ["RetryClassifier"]

import logging
from typing import TYPE_CHECKING, Any

from persevere.outcome import (
    ExecutionResult,
    Failed,
    NotYetAvailable,
    Ready,
    Retryable,
    Success,
    Terminal,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: logging.Logger = logging.getLogger(__name__)


class RetryClassifier:
    """Decides whether the outcome of an attempt should be retried.

    An outcome is transient when the returned value is one of the
    ``retryable_returns`` sentinels, or when the raised exception is an
    instance of one of the ``retryable_exceptions`` categories. Operations
    can also return ``NotYetAvailable`` or ``Failed`` to state their intent
    explicitly. Every other outcome is final: a returned value is a
    success, a raised exception is terminal.

    Args:
        retryable_returns: Sentinel values meaning "nothing yet". A value
            matches a sentinel when it has the same type and compares
            equal, so ``0`` does not match ``False``.
        retryable_exceptions: Exception types considered transient.
        retry_if: Optional custom predicate receiving ``(value, None)`` for
            returned values and ``(None, exception)`` for raised
            exceptions. When set, it replaces the sentinel and category
            checks.

    Example:
        ```pycon
        >>> from persevere.classifier import RetryClassifier
        >>> classifier = RetryClassifier(
        ...     retryable_returns=(False,), retryable_exceptions=(ConnectionError,)
        ... )
        >>> classifier.classify_value("image.png")
        Success(value='image.png')
        >>> classifier.classify_value(False)
        Retryable(reason='retryable return value False', cause=None, value=False)
        >>> classifier.classify_exception(ValueError("bad request"))
        Terminal(error=ValueError('bad request'))

        ```
    """

    def __init__(
        self,
        retryable_returns: Iterable[Any] = (),
        retryable_exceptions: Iterable[type[BaseException]] = (),
        retry_if: Callable[[Any, BaseException | None], bool] | None = None,
    ) -> None:
        self.retryable_returns = tuple(retryable_returns)
        self.retryable_exceptions = tuple(retryable_exceptions)
        self.retry_if = retry_if

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retryable_returns={self.retryable_returns}, "
            f"retryable_exceptions={self.retryable_exceptions}, retry_if={self.retry_if})"
        )

    def classify_value(self, value: Any) -> ExecutionResult:
        """Classify a value returned by the operation.

        Args:
            value: The value returned by the operation.

        Returns:
            ``Success`` if the value is accepted, ``Retryable`` if it is a
            retryable sentinel, or the classification of the wrapped
            exception if the operation returned ``Failed``.
        """
        if isinstance(value, Ready):
            return Success(value.value)
        if isinstance(value, NotYetAvailable):
            return Retryable(reason=value.reason)
        if isinstance(value, Failed):
            return self.classify_exception(value.error)

        if self.retry_if is not None:
            if self.retry_if(value, None):
                return Retryable(reason="retry_if predicate", value=value)
            return Success(value)

        if self._is_retryable_return(value):
            return Retryable(reason=f"retryable return value {value!r}", value=value)
        return Success(value)

    def classify_exception(self, exception: BaseException) -> ExecutionResult:
        """Classify an exception raised by the operation.

        Args:
            exception: The exception to evaluate.

        Returns:
            ``Retryable`` if the exception is transient, otherwise
            ``Terminal``.
        """
        if self.retry_if is not None:
            if self.retry_if(None, exception):
                return Retryable(reason="retry_if predicate", cause=exception)
            logger.debug(f"{type(exception).__name__} is not retryable (retry_if returned False)")
            return Terminal(exception)

        if isinstance(exception, self.retryable_exceptions):
            return Retryable(reason=type(exception).__name__, cause=exception)
        logger.debug(f"{type(exception).__name__} is not a retryable exception")
        return Terminal(exception)

    def _is_retryable_return(self, value: Any) -> bool:
        return any(
            type(value) is type(sentinel) and value == sentinel
            for sentinel in self.retryable_returns
        )
