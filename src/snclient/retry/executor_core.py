r"""Shared core logic for retry executors.

This module provides the error constructors used by both the
synchronous and asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["create_status_error", "create_transport_error"]

from typing import TYPE_CHECKING

import httpx

from snclient.exceptions import HttpStatusError, HttpTransportError

if TYPE_CHECKING:
    from snclient.exceptions import HttpRequestError


def create_status_error(
    response: httpx.Response,
    url: str,
    method: str,
    attempts: int,
) -> HttpRequestError:
    """Create HttpStatusError from a non-success response.

    Args:
        response: The response with a non-success status code.
        url: The URL being requested.
        method: The HTTP method being used.
        attempts: Number of attempts made (1-indexed).

    Returns:
        HttpStatusError carrying the status code and the response.
    """
    if attempts > 1:
        message = (
            f"{method} request to {url} failed with status "
            f"{response.status_code} after {attempts} attempts"
        )
    else:
        message = f"{method} request to {url} failed with status {response.status_code}"
    return HttpStatusError(
        method=method,
        url=url,
        message=message,
        status_code=response.status_code,
        response=response,
        attempts=attempts,
    )


def create_transport_error(
    exc: Exception,
    url: str,
    method: str,
    attempts: int,
    transient: bool,
) -> HttpRequestError:
    """Create HttpTransportError from a transport exception.

    Args:
        exc: The exception raised while building or sending the request.
        url: The URL being requested.
        method: The HTTP method being used.
        attempts: Number of attempts made (1-indexed).
        transient: Whether the exception is connect or timeout class.

    Returns:
        HttpTransportError with the original exception as cause.
    """
    if isinstance(exc, httpx.TimeoutException):
        message = f"{method} request to {url} timed out ({attempts} attempts)"
    else:
        message = f"{method} request to {url} failed after {attempts} attempts: {exc}"
    return HttpTransportError(
        method=method,
        url=url,
        message=message,
        attempts=attempts,
        cause=exc,
        transient=transient,
    )
