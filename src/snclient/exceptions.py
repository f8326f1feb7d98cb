r"""Exceptions raised by the snclient request execution engine.

Every terminal condition of a call is surfaced as an
``HttpRequestError``. The two concrete subclasses tell a failure derived
from an HTTP status code apart from a failure of the transport layer.
"""

from __future__ import annotations

__all__ = ["HttpRequestError", "HttpStatusError", "HttpTransportError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HttpRequestError(Exception):
    r"""Base exception for failed HTTP requests.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: The error message.
        status_code: The HTTP status code, if a response was received.
        response: The last response received, if any.
        attempts: The number of attempts made (1 for the initial
            request alone).
        cause: The underlying exception, if any. It is also chained as
            ``__cause__``.

    Example:
        ```pycon
        >>> from snclient.exceptions import HttpRequestError
        >>> exc = HttpRequestError(
        ...     method="GET", url="https://api.example.com/data", message="failed"
        ... )
        >>> exc.method, exc.attempts
        ('GET', 1)

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        attempts: int = 1,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.attempts = attempts
        self.__cause__ = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"status_code={self.status_code}, attempts={self.attempts})"
        )


class HttpStatusError(HttpRequestError):
    r"""Raised when the server answered with a non-success status code.

    ``status_code`` and ``response`` are always set.
    """

    @property
    def is_client_error(self) -> bool:
        """``True`` if the status code is in the 4xx range."""
        return self.status_code is not None and 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        """``True`` if the status code is in the 5xx range."""
        return self.status_code is not None and 500 <= self.status_code < 600


class HttpTransportError(HttpRequestError):
    r"""Raised when the request failed below the HTTP layer.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: The error message.
        attempts: The number of attempts made.
        cause: The transport exception raised by httpx.
        transient: ``True`` if the failure was a connect or timeout
            error, i.e. it was retried until the budget ran out.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        attempts: int = 1,
        cause: BaseException | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(method=method, url=url, message=message, attempts=attempts, cause=cause)
        self.transient = transient
