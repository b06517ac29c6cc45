r"""persevere - Resilient execution of operations with automatic retry logic.

This package runs a caller-supplied operation until it succeeds, a retry
budget is exhausted, or a time bound is reached, waiting between attempts
according to a pluggable wait strategy and notifying subscribers of every
step for logging and metrics.

Key Features:
    - Wait strategies: Static, Fibonacci, Exponential (with optional cap), and no wait
    - Termination strategies: time budget, attempt bound, or unbounded
    - Retry classification of returned sentinel values and exception categories
    - Explicit outcome types: Ready, NotYetAvailable, Failed
    - Immediate short-circuit on non-retryable failures
    - Lifecycle events forwarded to isolated subscribers (logging, callbacks)
    - Synchronous and asyncio executors
    - httpx-aware classification of transient HTTP failures

Example:
    ```pycon
    >>> from persevere import Executor, ExecutorConfig, RetryClassifier
    >>> from persevere.wait import NoWait
    >>> attempts = iter([ConnectionError("reset"), "comic.gif"])
    >>> def fetch_image() -> str:
    ...     outcome = next(attempts)
    ...     if isinstance(outcome, Exception):
    ...         raise outcome
    ...     return outcome
    ...
    >>> executor = Executor(
    ...     ExecutorConfig(
    ...         wait_strategy=NoWait(),
    ...         classifier=RetryClassifier(retryable_exceptions=[ConnectionError]),
    ...     )
    ... )
    >>> executor.execute(3, fetch_image)
    'comic.gif'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncExecutor",
    "ExecutorConfig",
    "Executor",
    "ExecutorError",
    "ExhaustedError",
    "Failed",
    "NotYetAvailable",
    "Ready",
    "RetryClassifier",
    "__version__",
    "make_executor",
]

from importlib.metadata import PackageNotFoundError, version

from persevere.classifier import RetryClassifier
from persevere.config import ExecutorConfig
from persevere.exceptions import ExecutorError, ExhaustedError
from persevere.executor import Executor
from persevere.executor_async import AsyncExecutor
from persevere.factory import make_executor
from persevere.outcome import Failed, NotYetAvailable, Ready

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
