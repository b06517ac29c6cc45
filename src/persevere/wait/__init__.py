r"""Wait strategies computing the delay between two attempts.

This package provides the wait strategies used by the executors: static,
Fibonacci, exponential, and no wait at all. Every strategy is a pure
function of the attempt number that just completed.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "ExponentialWait",
    "FibonacciWait",
    "NoWait",
    "StaticWait",
]

from persevere.wait.base import BaseWaitStrategy
from persevere.wait.exponential import ExponentialWait
from persevere.wait.fibonacci import FibonacciWait
from persevere.wait.none import NoWait
from persevere.wait.static import StaticWait
