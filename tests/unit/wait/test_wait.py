r"""Unit tests for the wait strategies."""

from __future__ import annotations

import math

import pytest

from persevere.wait import (
    BaseWaitStrategy,
    ExponentialWait,
    FibonacciWait,
    NoWait,
    StaticWait,
)

STRATEGIES = [
    pytest.param(StaticWait(delay=2.0), id="static"),
    pytest.param(FibonacciWait(base_delay=60.0, max_delay=600.0), id="fibonacci"),
    pytest.param(ExponentialWait(base_delay=1.0, max_delay=30.0), id="exponential"),
    pytest.param(NoWait(), id="none"),
]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_wait_strategy_is_pure(strategy: BaseWaitStrategy) -> None:
    """Test that the same attempt always yields the same delay."""
    first = [strategy.calculate(attempt) for attempt in range(1, 20)]
    second = [strategy.calculate(attempt) for attempt in reversed(range(1, 20))]
    assert first == list(reversed(second))


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_wait_strategy_is_non_negative(strategy: BaseWaitStrategy) -> None:
    assert all(strategy.calculate(attempt) >= 0 for attempt in range(1, 50))


##############################
#     Tests for StaticWait     #
##############################


def test_static_wait_default() -> None:
    assert StaticWait().calculate(1) == 1.0


def test_static_wait_constant() -> None:
    wait = StaticWait(delay=5.0)
    assert [wait.calculate(attempt) for attempt in range(1, 5)] == [5.0, 5.0, 5.0, 5.0]


def test_static_wait_zero() -> None:
    assert StaticWait(delay=0).calculate(3) == 0


def test_static_wait_negative_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        StaticWait(delay=-1.0)


def test_static_wait_repr() -> None:
    assert repr(StaticWait(delay=2.5)) == "StaticWait(delay=2.5)"


#################################
#     Tests for FibonacciWait     #
#################################


def test_fibonacci_wait_sequence() -> None:
    wait = FibonacciWait(base_delay=60)
    assert [wait.calculate(attempt) for attempt in range(1, 6)] == [
        60.0,
        60.0,
        120.0,
        180.0,
        300.0,
    ]


def test_fibonacci_wait_longer_sequence() -> None:
    wait = FibonacciWait(base_delay=1.0)
    assert [wait.calculate(attempt) for attempt in range(1, 11)] == [
        1.0,
        1.0,
        2.0,
        3.0,
        5.0,
        8.0,
        13.0,
        21.0,
        34.0,
        55.0,
    ]


def test_fibonacci_wait_max_delay() -> None:
    wait = FibonacciWait(base_delay=60, max_delay=150)
    assert [wait.calculate(attempt) for attempt in range(1, 6)] == [
        60.0,
        60.0,
        120.0,
        150.0,
        150.0,
    ]


def test_fibonacci_wait_zero_attempt() -> None:
    assert FibonacciWait(base_delay=60).calculate(0) == 0.0


@pytest.mark.parametrize(("n", "expected"), [(0, 0), (1, 1), (2, 1), (3, 2), (12, 144)])
def test_fibonacci_number(n: int, expected: int) -> None:
    assert FibonacciWait._fibonacci(n) == expected


def test_fibonacci_wait_max_delay_large_attempt() -> None:
    wait = FibonacciWait(base_delay=60, max_delay=3600)
    assert wait.calculate(1100) == 3600.0
    assert wait.calculate(1500) == 3600.0


def test_fibonacci_wait_large_attempt_without_cap() -> None:
    assert FibonacciWait(base_delay=60).calculate(1500) == math.inf


def test_fibonacci_wait_negative_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        FibonacciWait(base_delay=-1.0)


@pytest.mark.parametrize("max_delay", [0.0, -1.0])
def test_fibonacci_wait_invalid_max_delay(max_delay: float) -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        FibonacciWait(base_delay=1.0, max_delay=max_delay)


###################################
#     Tests for ExponentialWait     #
###################################


def test_exponential_wait_sequence() -> None:
    wait = ExponentialWait(base_delay=1.0)
    assert [wait.calculate(attempt) for attempt in range(1, 5)] == [1.0, 2.0, 4.0, 8.0]


def test_exponential_wait_base_delay() -> None:
    wait = ExponentialWait(base_delay=0.5)
    assert [wait.calculate(attempt) for attempt in range(1, 4)] == [0.5, 1.0, 2.0]


def test_exponential_wait_max_delay() -> None:
    wait = ExponentialWait(base_delay=1.0, max_delay=5.0)
    assert [wait.calculate(attempt) for attempt in range(1, 6)] == [1.0, 2.0, 4.0, 5.0, 5.0]


def test_exponential_wait_max_delay_large_attempt() -> None:
    wait = ExponentialWait(base_delay=1.0, max_delay=60.0)
    assert wait.calculate(1100) == 60.0
    assert wait.calculate(5000) == 60.0


def test_exponential_wait_large_attempt_without_cap() -> None:
    assert ExponentialWait(base_delay=1.0).calculate(1100) == math.inf


def test_exponential_wait_zero_base_delay_large_attempt() -> None:
    assert ExponentialWait(base_delay=0.0).calculate(1100) == 0.0


def test_exponential_wait_negative_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialWait(base_delay=-0.1)


def test_exponential_wait_invalid_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        ExponentialWait(max_delay=0.0)


def test_exponential_wait_repr() -> None:
    assert repr(ExponentialWait(base_delay=2.0, max_delay=8.0)) == (
        "ExponentialWait(base_delay=2.0, max_delay=8.0)"
    )


##########################
#     Tests for NoWait     #
##########################


def test_no_wait() -> None:
    assert [NoWait().calculate(attempt) for attempt in range(1, 4)] == [0.0, 0.0, 0.0]


def test_base_wait_strategy_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseWaitStrategy()
