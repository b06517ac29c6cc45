r"""Retry classification for operations performing HTTP calls with httpx.

Network-level failures (timeouts, connection resets, protocol errors) and
HTTP status errors in ``TRANSIENT_STATUS_CODES`` are transient; any other
HTTP status error, such as a malformed request rejected with 400 or 404,
is terminal and never retried.

Example:
    ```pycon
    >>> import httpx
    >>> from persevere.http import HttpRetryClassifier
    >>> classifier = HttpRetryClassifier()
    >>> classifier.classify_exception(httpx.ConnectTimeout("timed out"))
    Retryable(reason='ConnectTimeout', cause=ConnectTimeout('timed out'), value=None)

    ```
"""

from __future__ import annotations

__all__ = [
    "TRANSIENT_HTTP_ERRORS",
    "TRANSIENT_STATUS_CODES",
    "HttpRetryClassifier",
    "is_transient_http_error",
    "raise_for_transient_status",
]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from persevere.classifier import RetryClassifier
from persevere.outcome import ExecutionResult, NotYetAvailable, Ready, Retryable, Terminal

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)

# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
TRANSIENT_STATUS_CODES = (429, 500, 502, 503, 504)

# httpx.TimeoutException, httpx.NetworkError and httpx.ProtocolError are
# all subclasses of httpx.TransportError
TRANSIENT_HTTP_ERRORS: tuple[type[BaseException], ...] = (httpx.TransportError,)


def is_transient_http_error(
    exception: BaseException, status_codes: Iterable[int] = TRANSIENT_STATUS_CODES
) -> bool:
    """Indicate if an exception raised by httpx is transient.

    Args:
        exception: The exception to evaluate.
        status_codes: The HTTP status codes considered transient.

    Returns:
        ``True`` for transport errors and for ``httpx.HTTPStatusError``
        with a transient status code, otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from persevere.http import is_transient_http_error
        >>> is_transient_http_error(httpx.ReadTimeout("timed out"))
        True
        >>> is_transient_http_error(ValueError("not http"))
        False

        ```
    """
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in tuple(status_codes)
    return isinstance(exception, TRANSIENT_HTTP_ERRORS)


def raise_for_transient_status(
    response: httpx.Response, status_codes: Iterable[int] = TRANSIENT_STATUS_CODES
) -> Ready | NotYetAvailable:
    """Convert an httpx response into an operation outcome.

    A response with a transient status code becomes ``NotYetAvailable``
    so the executor retries it without an exception being raised. Any
    other error status raises ``httpx.HTTPStatusError`` like
    ``response.raise_for_status()``, and a successful response is
    wrapped in ``Ready``.

    Args:
        response: The response to convert.
        status_codes: The HTTP status codes considered transient.

    Returns:
        ``Ready(response)`` or ``NotYetAvailable`` naming the status.

    Raises:
        httpx.HTTPStatusError: If the status is an error status that is
            not transient.

    Example:
        ```pycon
        >>> import httpx
        >>> from persevere.http import raise_for_transient_status
        >>> request = httpx.Request("GET", "https://example.com/feed.xml")
        >>> raise_for_transient_status(httpx.Response(503, request=request))
        NotYetAvailable(reason='status 503')

        ```
    """
    if response.status_code in tuple(status_codes):
        return NotYetAvailable(reason=f"status {response.status_code}")
    response.raise_for_status()
    return Ready(response)


class HttpRetryClassifier(RetryClassifier):
    """Retry classifier aware of httpx exceptions.

    Args:
        retryable_returns: Sentinel values meaning "nothing yet".
        retryable_exceptions: Additional exception types considered
            transient, on top of ``TRANSIENT_HTTP_ERRORS``.
        status_codes: The HTTP status codes considered transient when the
            operation raises ``httpx.HTTPStatusError``, typically through
            ``response.raise_for_status()``.
    """

    def __init__(
        self,
        retryable_returns: Iterable[Any] = (),
        retryable_exceptions: Iterable[type[BaseException]] = (),
        status_codes: Iterable[int] = TRANSIENT_STATUS_CODES,
    ) -> None:
        super().__init__(
            retryable_returns=retryable_returns,
            retryable_exceptions=(*TRANSIENT_HTTP_ERRORS, *retryable_exceptions),
        )
        self.status_codes = tuple(status_codes)

    def classify_exception(self, exception: BaseException) -> ExecutionResult:
        if isinstance(exception, httpx.HTTPStatusError):
            status_code = exception.response.status_code
            if status_code in self.status_codes:
                return Retryable(reason=f"status {status_code}", cause=exception)
            logger.debug(f"HTTP status {status_code} is not retryable")
            return Terminal(exception)
        return super().classify_exception(exception)
