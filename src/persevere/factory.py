r"""Convenience builder for executors.

``make_executor`` builds an executor for one call site: it accepts a wait
given as a number of seconds or as a wait strategy, and attaches a
``LoggingSubscriber`` named after the call site.

Example:
    ```pycon
    >>> import logging
    >>> from persevere.factory import make_executor
    >>> from persevere.wait import ExponentialWait
    >>> logger = logging.getLogger("dilbot")
    >>> image_executor = make_executor("image", wait=60, logger=logger)
    >>> image_executor.wait_strategy
    StaticWait(delay=60)
    >>> upload_executor = make_executor("twitter-image", wait=ExponentialWait(), logger=logger)
    >>> upload_executor.wait_strategy
    ExponentialWait(base_delay=1.0, max_delay=None)

    ```
"""

from __future__ import annotations

__all__ = ["make_executor"]

import logging
from typing import TYPE_CHECKING

from persevere.classifier import RetryClassifier
from persevere.config import ExecutorConfig
from persevere.executor import Executor
from persevere.executor_async import AsyncExecutor
from persevere.notifier import LoggingSubscriber
from persevere.termination import BaseTerminationStrategy, NoTermination, TimeBoundTermination
from persevere.wait import BaseWaitStrategy, NoWait, StaticWait

if TYPE_CHECKING:
    from collections.abc import Iterable

    from persevere.notifier import BaseSubscriber


def make_executor(
    name: str,
    wait: float | BaseWaitStrategy | None = None,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.ERROR,
    message: str | None = None,
    classifier: RetryClassifier | None = None,
    time_budget: float | BaseTerminationStrategy | None = None,
    subscribers: Iterable[BaseSubscriber] = (),
    asynchronous: bool = False,
) -> Executor | AsyncExecutor:
    """Build an executor for a named call site.

    Args:
        name: The name of the call site, used in log messages.
        wait: The wait between attempts: a number of seconds for a static
            wait, a wait strategy, or ``None`` for no wait at all.
        logger: The logger of the attached ``LoggingSubscriber``.
        level: The log level used when giving up.
        message: The message used when giving up. Defaults to
            ``"Unable to execute {name}"``.
        classifier: The retry classifier. Defaults to a classifier
            retrying every ``Exception``.
        time_budget: Optional time budget in seconds, or a termination
            strategy.
        subscribers: Additional subscribers, notified after the logging
            subscriber.
        asynchronous: If ``True``, build an ``AsyncExecutor``.

    Returns:
        The configured executor.

    Raises:
        TypeError: If ``wait`` or ``time_budget`` has an unsupported type.
    """
    config = ExecutorConfig(
        wait_strategy=_as_wait_strategy(wait),
        termination_strategy=_as_termination_strategy(time_budget),
        classifier=(
            classifier
            if classifier is not None
            else RetryClassifier(retryable_exceptions=(Exception,))
        ),
        subscribers=(
            LoggingSubscriber(
                logger=logger,
                level=level,
                message=message if message is not None else f"Unable to execute {name}",
                name=name,
            ),
            *subscribers,
        ),
    )
    if asynchronous:
        return AsyncExecutor(config)
    return Executor(config)


def _as_wait_strategy(wait: float | BaseWaitStrategy | None) -> BaseWaitStrategy:
    if wait is None:
        return NoWait()
    if isinstance(wait, BaseWaitStrategy):
        return wait
    if isinstance(wait, (int, float)) and not isinstance(wait, bool):
        return StaticWait(delay=wait)
    msg = f"wait must be a number of seconds or a BaseWaitStrategy, got {type(wait).__name__}"
    raise TypeError(msg)


def _as_termination_strategy(
    time_budget: float | BaseTerminationStrategy | None,
) -> BaseTerminationStrategy:
    if time_budget is None:
        return NoTermination()
    if isinstance(time_budget, BaseTerminationStrategy):
        return time_budget
    if isinstance(time_budget, (int, float)) and not isinstance(time_budget, bool):
        return TimeBoundTermination(budget=time_budget)
    msg = (
        "time_budget must be a number of seconds or a BaseTerminationStrategy, "
        f"got {type(time_budget).__name__}"
    )
    raise TypeError(msg)
