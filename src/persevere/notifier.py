r"""Notification of lifecycle events to subscribers.

This module provides the ``Notifier`` that forwards lifecycle events to an
ordered set of subscribers, and the built-in subscribers:

- ``CallbackSubscriber``: dispatches each event type to a user callback
- ``LoggingSubscriber``: writes events to a ``logging.Logger``

A subscriber raising an exception never aborts the retry loop: the failure
is logged and forwarded to the optional fallback error reporter, and the
remaining subscribers still receive the event.

Example:
    ```pycon
    >>> from persevere.events import AttemptStarted
    >>> from persevere.notifier import CallbackSubscriber, Notifier
    >>> def on_attempt(event):
    ...     print(f"attempt {event.attempt}/{event.max_attempts}")
    ...
    >>> notifier = Notifier([CallbackSubscriber(on_attempt_started=on_attempt)])
    >>> notifier.notify(AttemptStarted(attempt=1, max_attempts=3))
    attempt 1/3

    ```
"""

from __future__ import annotations

__all__ = ["BaseSubscriber", "CallbackSubscriber", "LoggingSubscriber", "Notifier"]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from persevere.events import (
    AttemptFailed,
    AttemptStarted,
    ExecutionEvent,
    GivingUp,
    Succeeded,
    Waiting,
)
from persevere.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: logging.Logger = logging.getLogger(__name__)


class BaseSubscriber(ABC):
    """Abstract base class for subscribers of lifecycle events."""

    @abstractmethod
    def handle(self, event: ExecutionEvent) -> None:
        """Handle a lifecycle event.

        Implementations must not block indefinitely: they run on the
        thread executing the operation, between two attempts.

        Args:
            event: The lifecycle event.
        """


class CallbackSubscriber(BaseSubscriber):
    """Subscriber dispatching each event type to an optional callback.

    Args:
        on_attempt_started: Called before each attempt.
        on_attempt_failed: Called after each transient outcome.
        on_waiting: Called before sleeping between two attempts.
        on_giving_up: Called when the loop stops without a result.
        on_succeeded: Called when an attempt succeeds.
    """

    def __init__(
        self,
        on_attempt_started: Callable[[AttemptStarted], None] | None = None,
        on_attempt_failed: Callable[[AttemptFailed], None] | None = None,
        on_waiting: Callable[[Waiting], None] | None = None,
        on_giving_up: Callable[[GivingUp], None] | None = None,
        on_succeeded: Callable[[Succeeded], None] | None = None,
    ) -> None:
        self._callbacks: dict[type[ExecutionEvent], Callable | None] = {
            AttemptStarted: on_attempt_started,
            AttemptFailed: on_attempt_failed,
            Waiting: on_waiting,
            GivingUp: on_giving_up,
            Succeeded: on_succeeded,
        }

    def handle(self, event: ExecutionEvent) -> None:
        callback = self._callbacks.get(type(event))
        if callback is not None:
            callback(event)


class LoggingSubscriber(BaseSubscriber):
    """Subscriber writing lifecycle events to a logger.

    Attempts, transient failures and waits are logged at DEBUG level, a
    success at DEBUG level, and giving up at ``level`` together with the
    traceback of the cause.

    Args:
        logger: The logger to write to. Defaults to this module's logger.
        level: The log level used when giving up (default: ERROR).
        message: The message prefix used when giving up.
        name: Optional name of the call site, added to every message and
            as the ``executor`` structured field.

    Example:
        ```pycon
        >>> import logging
        >>> from persevere.notifier import LoggingSubscriber
        >>> subscriber = LoggingSubscriber(
        ...     logging.getLogger("dilbot"), level=logging.CRITICAL, message="Unable to get image"
        ... )
        >>> subscriber.level == logging.CRITICAL
        True

        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.ERROR,
        message: str = "Execution failed",
        name: str | None = None,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level
        self.message = message
        self.name = name

    def handle(self, event: ExecutionEvent) -> None:
        prefix = f"[{self.name}] " if self.name else ""
        fields = {
            "executor": self.name,
            "event": type(event).__name__,
            "attempt": event.attempt,
            "max_attempts": event.max_attempts,
        }
        if isinstance(event, AttemptStarted):
            log_structured(
                self.logger,
                logging.DEBUG,
                f"{prefix}Attempt {event.attempt}/{event.max_attempts}",
                **fields,
            )
        elif isinstance(event, AttemptFailed):
            log_structured(
                self.logger,
                logging.DEBUG,
                f"{prefix}Attempt {event.attempt}/{event.max_attempts} "
                f"failed ({event.reason})",
                **fields,
            )
        elif isinstance(event, Waiting):
            log_structured(
                self.logger,
                logging.DEBUG,
                f"{prefix}Waiting {event.delay:.2f}s after attempt {event.attempt}",
                delay=event.delay,
                **fields,
            )
        elif isinstance(event, GivingUp):
            self.logger.log(
                self.level,
                f"{prefix}{self.message}: giving up after {event.attempt} attempt(s) "
                f"in {event.elapsed:.2f}s: {event.cause}",
                exc_info=event.cause,
                extra={"elapsed": event.elapsed, "exhausted": event.exhausted, **fields},
            )
        elif isinstance(event, Succeeded):
            log_structured(
                self.logger,
                logging.DEBUG,
                f"{prefix}Succeeded on attempt {event.attempt} in {event.elapsed:.2f}s",
                elapsed=event.elapsed,
                **fields,
            )


class Notifier:
    """Forwards lifecycle events to an ordered set of subscribers.

    Subscribers are invoked in insertion order. A failing subscriber is
    isolated: its exception is logged and passed to ``on_subscriber_error``
    if provided, and never propagated to the executor.

    Args:
        subscribers: The subscribers, in invocation order.
        on_subscriber_error: Optional fallback error reporter receiving the
            failing subscriber, the event and the exception.
    """

    def __init__(
        self,
        subscribers: Iterable[BaseSubscriber] = (),
        on_subscriber_error: (
            Callable[[BaseSubscriber, ExecutionEvent, Exception], None] | None
        ) = None,
    ) -> None:
        self.subscribers: tuple[BaseSubscriber, ...] = tuple(subscribers)
        self.on_subscriber_error = on_subscriber_error

    def __len__(self) -> int:
        return len(self.subscribers)

    def notify(self, event: ExecutionEvent) -> None:
        """Forward an event to every subscriber.

        Args:
            event: The lifecycle event.
        """
        for subscriber in self.subscribers:
            try:
                subscriber.handle(event)
            except Exception as exc:
                logger.exception(
                    f"Subscriber {subscriber!r} failed to handle {type(event).__name__}"
                )
                self._report(subscriber, event, exc)

    def _report(self, subscriber: BaseSubscriber, event: ExecutionEvent, exc: Exception) -> None:
        if self.on_subscriber_error is None:
            return
        try:
            self.on_subscriber_error(subscriber, event, exc)
        except Exception:
            logger.exception("Subscriber error reporter failed")
