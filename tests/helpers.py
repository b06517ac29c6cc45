r"""Shared test helpers for the executor tests."""

from __future__ import annotations

from typing import Any

from persevere.events import ExecutionEvent
from persevere.notifier import BaseSubscriber


class FakeClock:
    """Deterministic replacement for ``time.monotonic`` and ``time.sleep``.

    Sleeping advances the clock instead of blocking, and operations can
    advance it with ``tick`` to simulate their own duration.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay

    def tick(self, seconds: float) -> None:
        self.now += seconds


class RecordingSubscriber(BaseSubscriber):
    """Subscriber recording every event it receives."""

    def __init__(self) -> None:
        self.events: list[ExecutionEvent] = []

    def handle(self, event: ExecutionEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [type(event).__name__ for event in self.events]


class FailingSubscriber(BaseSubscriber):
    """Subscriber raising on every event."""

    def __init__(self) -> None:
        self.calls = 0

    def handle(self, event: ExecutionEvent) -> None:  # noqa: ARG002
        self.calls += 1
        msg = "subscriber is broken"
        raise RuntimeError(msg)


def sequence(*outcomes: Any) -> Any:
    """Create an operation returning or raising the given outcomes in order."""
    iterator = iter(outcomes)

    def operation() -> Any:
        outcome = next(iterator)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    return operation
