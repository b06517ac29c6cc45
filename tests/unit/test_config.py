r"""Unit tests for the executor configuration."""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from persevere.classifier import RetryClassifier
from persevere.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS, ExecutorConfig
from persevere.termination import NoTermination, TimeBoundTermination
from persevere.wait import ExponentialWait, FibonacciWait
from tests.helpers import RecordingSubscriber


def test_defaults() -> None:
    assert DEFAULT_MAX_ATTEMPTS == 3
    assert DEFAULT_BASE_DELAY == 1.0


def test_executor_config_default() -> None:
    config = ExecutorConfig()

    assert isinstance(config.wait_strategy, ExponentialWait)
    assert config.wait_strategy.base_delay == DEFAULT_BASE_DELAY
    assert isinstance(config.termination_strategy, NoTermination)
    assert isinstance(config.classifier, RetryClassifier)
    assert config.subscribers == ()
    assert config.on_subscriber_error is None


def test_executor_config_subscribers_are_frozen() -> None:
    subscribers = [RecordingSubscriber(), RecordingSubscriber()]
    config = ExecutorConfig(subscribers=subscribers)

    subscribers.append(RecordingSubscriber())

    assert objects_are_equal(config.subscribers, tuple(subscribers[:2]))


def test_executor_config_is_frozen() -> None:
    config = ExecutorConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.wait_strategy = FibonacciWait()


def test_executor_config_replace() -> None:
    config = ExecutorConfig(wait_strategy=FibonacciWait(base_delay=60))
    polling = dataclasses.replace(config, termination_strategy=TimeBoundTermination(7200))

    assert polling.wait_strategy is config.wait_strategy
    assert isinstance(polling.termination_strategy, TimeBoundTermination)
    assert isinstance(config.termination_strategy, NoTermination)


def test_executor_config_invalid_wait_strategy() -> None:
    with pytest.raises(TypeError, match=r"wait_strategy must be a BaseWaitStrategy"):
        ExecutorConfig(wait_strategy=60)


def test_executor_config_invalid_termination_strategy() -> None:
    with pytest.raises(TypeError, match=r"termination_strategy must be a BaseTerminationStrategy"):
        ExecutorConfig(termination_strategy=7200)


def test_executor_config_invalid_classifier() -> None:
    with pytest.raises(TypeError, match=r"classifier must be a RetryClassifier"):
        ExecutorConfig(classifier=[False])
