r"""Configuration of the executors.

This module provides the default values and the ``ExecutorConfig`` frozen
dataclass bundling the strategies used by an executor. The configuration
is immutable: a call site needing a different behavior builds a new
configuration, for example with ``dataclasses.replace``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "ExecutorConfig",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from persevere.classifier import RetryClassifier
from persevere.termination import BaseTerminationStrategy, NoTermination
from persevere.wait import BaseWaitStrategy, ExponentialWait

if TYPE_CHECKING:
    from collections.abc import Callable

    from persevere.events import ExecutionEvent
    from persevere.notifier import BaseSubscriber

# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Default base delay of the exponential wait strategy
# With 1.0: waits 1s after the 1st attempt, 2s after the 2nd, 4s after the 3rd
DEFAULT_BASE_DELAY = 1.0


@dataclass(frozen=True)
class ExecutorConfig:
    """Configuration of an executor.

    Args:
        wait_strategy: Strategy computing the delay between two attempts.
            Defaults to ``ExponentialWait(base_delay=1.0)``.
        termination_strategy: Strategy imposing a bound on top of
            ``max_attempts``. Defaults to ``NoTermination()``.
        classifier: Classifier deciding which outcomes are transient.
            Defaults to a classifier for which nothing is transient.
        subscribers: Subscribers notified of lifecycle events, in order.
        on_subscriber_error: Optional fallback error reporter receiving
            the failing subscriber, the event and the exception.

    Raises:
        TypeError: If a strategy does not have the expected type.

    Example:
        ```pycon
        >>> from persevere.config import ExecutorConfig
        >>> from persevere.wait import StaticWait
        >>> config = ExecutorConfig(wait_strategy=StaticWait(5.0))
        >>> config.wait_strategy
        StaticWait(delay=5.0)
        >>> config.termination_strategy
        NoTermination()

        ```
    """

    wait_strategy: BaseWaitStrategy = field(
        default_factory=lambda: ExponentialWait(base_delay=DEFAULT_BASE_DELAY)
    )
    termination_strategy: BaseTerminationStrategy = field(default_factory=NoTermination)
    classifier: RetryClassifier = field(default_factory=RetryClassifier)
    subscribers: tuple[BaseSubscriber, ...] = ()
    on_subscriber_error: (
        Callable[[BaseSubscriber, ExecutionEvent, Exception], None] | None
    ) = None

    def __post_init__(self) -> None:
        if not isinstance(self.wait_strategy, BaseWaitStrategy):
            msg = f"wait_strategy must be a BaseWaitStrategy, got {type(self.wait_strategy).__name__}"
            raise TypeError(msg)
        if not isinstance(self.termination_strategy, BaseTerminationStrategy):
            msg = (
                "termination_strategy must be a BaseTerminationStrategy, "
                f"got {type(self.termination_strategy).__name__}"
            )
            raise TypeError(msg)
        if not isinstance(self.classifier, RetryClassifier):
            msg = f"classifier must be a RetryClassifier, got {type(self.classifier).__name__}"
            raise TypeError(msg)
        # Lists are accepted for convenience and frozen into a tuple
        object.__setattr__(self, "subscribers", tuple(self.subscribers))
