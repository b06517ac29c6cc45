r"""Asynchronous executor running an operation until it succeeds.

This module provides the asyncio counterpart of ``Executor``. It follows
the same state machine, but waits with ``asyncio.sleep`` and accepts
operations returning awaitables, such as coroutine functions.
"""

from __future__ import annotations

__all__ = ["AsyncExecutor"]

import asyncio
import inspect
import logging
import time
from typing import TYPE_CHECKING, Any

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

logger: logging.Logger = logging.getLogger(__name__)


class AsyncExecutor(BaseExecutor):
    """Executes an async operation with automatic retry logic.

    Waiting suspends the calling task only. Each ``execute`` call owns its
    attempt counter and start time, so concurrent calls on one instance do
    not interfere with each other.

    Args:
        config: The executor configuration. Defaults to
            ``ExecutorConfig()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from persevere import AsyncExecutor
        >>> async def fetch() -> str:
        ...     return "comic.gif"
        ...
        >>> asyncio.run(AsyncExecutor().execute(3, fetch))
        'comic.gif'

        ```
    """

    async def execute(self, max_attempts: int, operation: Callable[[], Any]) -> Any:
        """Execute the async operation with retry logic.

        Args:
            max_attempts: The maximum number of attempts, inclusive.
                Must be >= 1.
            operation: The zero-argument operation to execute. It may
                return an awaitable, which is awaited.

        Returns:
            The first accepted result of the operation.

        Raises:
            ExhaustedError: If the attempts or the time budget ran out
                while the outcomes were transient.
            ValueError: If ``max_attempts`` is lower than 1.
            TypeError: If ``max_attempts`` is not an integer or if
                ``operation`` is not callable.
            Exception: The operation's own exception, unmodified, if it
                is not retryable.
        """
        validate_max_attempts(max_attempts)
        validate_operation(operation)

        notifier = self.notifier
        state = CallState(max_attempts=max_attempts, start_time=time.monotonic())
        while True:
            notifier.notify(AttemptStarted(attempt=state.attempt, max_attempts=max_attempts))
            result = await self._attempt_async(operation)

            if isinstance(result, Success):
                record_success(notifier, state, result.value)
                return result.value

            if isinstance(result, Terminal):
                give_up_terminal(notifier, state, result.error)
                raise result.error

            record_transient(notifier, state, result)
            if should_give_up(state, self.termination_strategy):
                raise give_up_exhausted(notifier, state) from state.last_cause

            delay = self.wait_strategy.calculate(state.attempt)
            notifier.notify(Waiting(attempt=state.attempt, max_attempts=max_attempts, delay=delay))
            await asyncio.sleep(delay)

            if stopped_while_waiting(state, self.termination_strategy):
                raise give_up_exhausted(notifier, state) from state.last_cause
            state.attempt += 1

    async def _attempt_async(self, operation: Callable[[], Any]) -> ExecutionResult:
        try:
            value = operation()
            if inspect.isawaitable(value):
                value = await value
        except Exception as exc:  # noqa: BLE001
            return self.classifier.classify_exception(exc)
        return self.classifier.classify_value(value)
