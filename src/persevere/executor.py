r"""Synchronous executor running an operation until it succeeds.

This module implements the retry loop with a class-based composition of
strategy objects: a wait strategy, a termination strategy, a retry
classifier, and a notifier forwarding lifecycle events to subscribers.
"""

from __future__ import annotations

__all__ = ["Executor"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from persevere.events import AttemptStarted, Waiting
from persevere.executor_core import (
    BaseExecutor,
    CallState,
    give_up_exhausted,
    give_up_terminal,
    record_success,
    record_transient,
    should_give_up,
    stopped_while_waiting,
)
from persevere.outcome import Success, Terminal
from persevere.validation import validate_max_attempts, validate_operation

if TYPE_CHECKING:
    from collections.abc import Callable

    from persevere.outcome import ExecutionResult

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class Executor(BaseExecutor):
    """Executes an operation with automatic retry logic.

    The operation is called in the current thread and the executor blocks
    with ``time.sleep`` between attempts. Use ``AsyncExecutor`` for
    coroutine functions.

    Args:
        config: The executor configuration. Defaults to
            ``ExecutorConfig()``.

    Example:
        ```pycon
        >>> from persevere import ExecutorConfig, Executor, RetryClassifier
        >>> from persevere.wait import NoWait
        >>> outcomes = iter([False, False, "comic.gif"])
        >>> executor = Executor(
        ...     ExecutorConfig(
        ...         wait_strategy=NoWait(), classifier=RetryClassifier(retryable_returns=[False])
        ...     )
        ... )
        >>> executor.execute(5, lambda: next(outcomes))
        'comic.gif'

        ```
    """

    def execute(self, max_attempts: int, operation: Callable[[], T]) -> T:
        """Execute the operation with retry logic.

        Args:
            max_attempts: The maximum number of attempts, inclusive.
                Must be >= 1.
            operation: The zero-argument operation to execute.

        Returns:
            The first accepted result of the operation.

        Raises:
            ExhaustedError: If the attempts or the time budget ran out
                while the outcomes were transient.
            ValueError: If ``max_attempts`` is lower than 1.
            TypeError: If ``max_attempts`` is not an integer, if
                ``operation`` is not callable, or if it returns an
                awaitable.
            Exception: The operation's own exception, unmodified, if it
                is not retryable.
        """
        validate_max_attempts(max_attempts)
        validate_operation(operation)

        state = CallState(max_attempts=max_attempts, start_time=time.monotonic())
        while True:
            self._notifier.notify(AttemptStarted(attempt=state.attempt, max_attempts=max_attempts))
            result = self._attempt(operation)

            if isinstance(result, Success):
                record_success(self._notifier, state, result.value)
                return result.value

            if isinstance(result, Terminal):
                give_up_terminal(self._notifier, state, result.error)
                raise result.error

            record_transient(self._notifier, state, result)
            if should_give_up(state, self.termination_strategy):
                raise give_up_exhausted(self._notifier, state) from state.last_cause

            delay = self.wait_strategy.calculate(state.attempt)
            self._notifier.notify(
                Waiting(attempt=state.attempt, max_attempts=max_attempts, delay=delay)
            )
            time.sleep(delay)

            if stopped_while_waiting(state, self.termination_strategy):
                raise give_up_exhausted(self._notifier, state) from state.last_cause
            state.attempt += 1

    def _attempt(self, operation: Callable[[], Any]) -> ExecutionResult:
        try:
            value = operation()
        except Exception as exc:  # noqa: BLE001
            return self.classifier.classify_exception(exc)
        if inspect.isawaitable(value):
            if inspect.iscoroutine(value):
                value.close()
            msg = (
                f"operation returned an awaitable ({type(value).__name__}), "
                "use AsyncExecutor to execute it"
            )
            raise TypeError(msg)
        return self.classifier.classify_value(value)
