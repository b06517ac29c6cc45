r"""Wait strategy that never waits."""

from __future__ import annotations

__all__ = ["NoWait"]

from persevere.wait.base import BaseWaitStrategy


class NoWait(BaseWaitStrategy):
    """Retry immediately, without any delay between attempts.

    Example:
        ```pycon
        >>> from persevere.wait import NoWait
        >>> NoWait().calculate(5)
        0.0

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return 0.0
