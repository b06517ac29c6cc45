r"""Unit tests for the httpx-aware retry classification."""

from __future__ import annotations

import httpx
import pytest

from persevere.http import (
    TRANSIENT_STATUS_CODES,
    HttpRetryClassifier,
    is_transient_http_error,
    raise_for_transient_status,
)
from persevere.outcome import NotYetAvailable, Ready, Retryable, Success, Terminal

TEST_URL = "https://api.example.com/statuses/update.json"


def status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", TEST_URL)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"Server error '{status_code}'", request=request, response=response
    )


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectTimeout("timed out"),
        httpx.ReadTimeout("timed out"),
        httpx.ConnectError("connection refused"),
        httpx.RemoteProtocolError("server disconnected"),
    ],
)
def test_is_transient_http_error_transport(exc: Exception) -> None:
    assert is_transient_http_error(exc)


@pytest.mark.parametrize("status_code", TRANSIENT_STATUS_CODES)
def test_is_transient_http_error_transient_status(status_code: int) -> None:
    assert is_transient_http_error(status_error(status_code))


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 422])
def test_is_transient_http_error_client_status(status_code: int) -> None:
    assert not is_transient_http_error(status_error(status_code))


def test_is_transient_http_error_custom_status_codes() -> None:
    assert is_transient_http_error(status_error(404), status_codes=[404])
    assert not is_transient_http_error(status_error(503), status_codes=[404])


def test_is_transient_http_error_other_exception() -> None:
    assert not is_transient_http_error(ValueError("not http"))


def test_http_retry_classifier_transport_error() -> None:
    exc = httpx.ReadTimeout("timed out")
    result = HttpRetryClassifier().classify_exception(exc)

    assert isinstance(result, Retryable)
    assert result.cause is exc


def test_http_retry_classifier_transient_status() -> None:
    exc = status_error(503)
    result = HttpRetryClassifier().classify_exception(exc)

    assert result == Retryable(reason="status 503", cause=exc)


def test_http_retry_classifier_client_status() -> None:
    exc = status_error(400)
    assert HttpRetryClassifier().classify_exception(exc) == Terminal(exc)


def test_http_retry_classifier_custom_status_codes() -> None:
    classifier = HttpRetryClassifier(status_codes=(500,))

    assert isinstance(classifier.classify_exception(status_error(500)), Retryable)
    assert isinstance(classifier.classify_exception(status_error(503)), Terminal)


def test_http_retry_classifier_additional_exceptions() -> None:
    classifier = HttpRetryClassifier(retryable_exceptions=[KeyError])

    assert isinstance(classifier.classify_exception(KeyError("media_id")), Retryable)
    assert isinstance(classifier.classify_exception(ValueError()), Terminal)


def test_http_retry_classifier_sentinel() -> None:
    classifier = HttpRetryClassifier(retryable_returns=[False])

    assert isinstance(classifier.classify_value(False), Retryable)
    assert classifier.classify_value({"media_id": "42"}) == Success({"media_id": "42"})


@pytest.mark.parametrize("status_code", TRANSIENT_STATUS_CODES)
def test_raise_for_transient_status_transient(status_code: int) -> None:
    response = httpx.Response(status_code, request=httpx.Request("GET", TEST_URL))
    assert raise_for_transient_status(response) == NotYetAvailable(f"status {status_code}")


def test_raise_for_transient_status_success() -> None:
    response = httpx.Response(200, request=httpx.Request("GET", TEST_URL))
    assert raise_for_transient_status(response) == Ready(response)


def test_raise_for_transient_status_client_error() -> None:
    response = httpx.Response(404, request=httpx.Request("GET", TEST_URL))
    with pytest.raises(httpx.HTTPStatusError):
        raise_for_transient_status(response)


def test_raise_for_transient_status_custom_status_codes() -> None:
    response = httpx.Response(404, request=httpx.Request("GET", TEST_URL))
    assert raise_for_transient_status(response, status_codes=[404]) == NotYetAvailable(
        "status 404"
    )
