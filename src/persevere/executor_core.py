r"""Shared core logic for the executors.

This module provides the executor base class, the per-call state and the
helper functions used by both the synchronous and the asynchronous
executor. Everything that changes during one ``execute`` call lives in a
``CallState`` created on that call's stack, so executors hold no mutable
state and can be reused.
"""

from __future__ import annotations

__all__ = [
    "BaseExecutor",
    "CallState",
    "give_up_exhausted",
    "give_up_terminal",
    "record_success",
    "record_transient",
    "should_give_up",
    "stopped_while_waiting",
]

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from persevere.config import ExecutorConfig
from persevere.events import AttemptFailed, GivingUp, Succeeded
from persevere.exceptions import ExhaustedError
from persevere.notifier import Notifier

if TYPE_CHECKING:
    from persevere.classifier import RetryClassifier
    from persevere.outcome import Retryable
    from persevere.termination import BaseTerminationStrategy
    from persevere.wait import BaseWaitStrategy

logger: logging.Logger = logging.getLogger(__name__)


class BaseExecutor:
    """Base class of the synchronous and asynchronous executors.

    It only bundles immutable strategy references. The attempt counter
    and the start time belong to each ``execute`` call, so one executor
    can serve any number of independent calls.

    Args:
        config: The executor configuration. Defaults to
            ``ExecutorConfig()``.
    """

    def __init__(self, config: ExecutorConfig | None = None) -> None:
        self._config = config if config is not None else ExecutorConfig()
        self._notifier = Notifier(
            self._config.subscribers, on_subscriber_error=self._config.on_subscriber_error
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(wait_strategy={self.wait_strategy!r}, "
            f"termination_strategy={self.termination_strategy!r}, "
            f"subscribers={len(self.notifier)})"
        )

    @property
    def config(self) -> ExecutorConfig:
        return self._config

    @property
    def wait_strategy(self) -> BaseWaitStrategy:
        return self._config.wait_strategy

    @property
    def termination_strategy(self) -> BaseTerminationStrategy:
        return self._config.termination_strategy

    @property
    def classifier(self) -> RetryClassifier:
        return self._config.classifier

    @property
    def notifier(self) -> Notifier:
        return self._notifier


@dataclass
class CallState:
    """Mutable state of one ``execute`` call.

    Attributes:
        max_attempts: The maximum number of attempts, inclusive.
        attempt: The current attempt number (1-indexed).
        start_time: The ``time.monotonic`` timestamp of the first attempt.
        last_reason: Why the last attempt was transient, if it was.
        last_cause: The last transient exception, if any.
        last_value: The last retryable value, if any.
    """

    max_attempts: int
    start_time: float
    attempt: int = 1
    last_reason: str | None = None
    last_cause: BaseException | None = None
    last_value: Any = None

    def elapsed(self) -> float:
        """Return the time in seconds since the first attempt started."""
        return time.monotonic() - self.start_time


def record_success(notifier: Notifier, state: CallState, value: Any) -> None:
    """Notify subscribers that the current attempt succeeded.

    Args:
        notifier: The notifier of the executor.
        state: The state of the call.
        value: The value returned to the caller.
    """
    logger.debug(f"Attempt {state.attempt}/{state.max_attempts} succeeded")
    notifier.notify(
        Succeeded(
            attempt=state.attempt,
            max_attempts=state.max_attempts,
            result=value,
            elapsed=state.elapsed(),
        )
    )


def record_transient(notifier: Notifier, state: CallState, result: Retryable) -> None:
    """Remember a transient outcome and notify subscribers.

    Args:
        notifier: The notifier of the executor.
        state: The state of the call.
        result: The transient outcome of the current attempt.
    """
    state.last_reason = result.reason
    state.last_cause = result.cause
    state.last_value = result.value
    logger.debug(
        f"Attempt {state.attempt}/{state.max_attempts} is transient ({result.reason})"
    )
    notifier.notify(
        AttemptFailed(
            attempt=state.attempt,
            max_attempts=state.max_attempts,
            reason=result.reason,
            cause=result.cause,
            value=result.value,
        )
    )


def should_give_up(state: CallState, termination: BaseTerminationStrategy) -> bool:
    """Indicate if the loop must stop after a transient outcome.

    The loop stops once the current attempt reaches ``max_attempts`` or
    when the termination strategy says so, whichever fires first.

    Args:
        state: The state of the call.
        termination: The termination strategy of the executor.

    Returns:
        ``True`` if no further attempt may start.
    """
    if state.attempt >= state.max_attempts:
        logger.debug(f"max_attempts ({state.max_attempts}) reached")
        return True
    if termination.should_stop(state.attempt, state.elapsed()):
        logger.debug(f"{termination!r} stopped the loop after attempt {state.attempt}")
        return True
    return False


def stopped_while_waiting(state: CallState, termination: BaseTerminationStrategy) -> bool:
    """Indicate if the termination bound was reached during the last wait.

    This prevents a new attempt from starting once a time budget has
    elapsed, even if attempts remain.

    Args:
        state: The state of the call.
        termination: The termination strategy of the executor.

    Returns:
        ``True`` if no further attempt may start.
    """
    if termination.should_stop(state.attempt, state.elapsed()):
        logger.debug(f"{termination!r} stopped the loop while waiting after attempt {state.attempt}")
        return True
    return False


def give_up_exhausted(notifier: Notifier, state: CallState) -> ExhaustedError:
    """Create the error raised when the retry budget is exhausted.

    Subscribers are notified with a ``GivingUp`` event before the error is
    returned to the executor, which raises it from the last transient
    cause.

    Args:
        notifier: The notifier of the executor.
        state: The state of the call.

    Returns:
        The error to raise.
    """
    elapsed = state.elapsed()
    error = ExhaustedError(
        f"Gave up after {state.attempt} attempt(s) in {elapsed:.2f}s "
        f"(last outcome: {state.last_reason})",
        attempts=state.attempt,
        elapsed=elapsed,
        cause=state.last_cause,
        last_value=state.last_value,
    )
    # Subscribers log the error before it is raised
    error.__cause__ = state.last_cause
    notifier.notify(
        GivingUp(
            attempt=state.attempt,
            max_attempts=state.max_attempts,
            cause=error,
            elapsed=elapsed,
            exhausted=True,
        )
    )
    return error


def give_up_terminal(notifier: Notifier, state: CallState, error: BaseException) -> None:
    """Notify subscribers that the operation failed with a terminal error.

    Args:
        notifier: The notifier of the executor.
        state: The state of the call.
        error: The operation's own exception, raised unmodified by the
            executor afterwards.
    """
    logger.debug(
        f"Attempt {state.attempt}/{state.max_attempts} failed with a non-retryable "
        f"{type(error).__name__}"
    )
    notifier.notify(
        GivingUp(
            attempt=state.attempt,
            max_attempts=state.max_attempts,
            cause=error,
            elapsed=state.elapsed(),
            exhausted=False,
        )
    )
