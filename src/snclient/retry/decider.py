r"""Retry decision logic for determining whether to retry requests.

This module provides the RetryDecider class that classifies the outcome
of one attempt. Successful responses end the call, server errors and
transient transport errors are retried while the retry budget lasts,
and everything else fails immediately.
"""

from __future__ import annotations

__all__ = ["TRANSIENT_EXCEPTIONS", "RetryDecider"]

import logging

import httpx

from snclient.retry.executor_core import create_status_error

logger: logging.Logger = logging.getLogger(__name__)

# Transport errors presumed to resolve on their own. ``TimeoutException``
# covers connect, read, write and pool timeouts.
TRANSIENT_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.ConnectError,
    httpx.TimeoutException,
)


class RetryDecider:
    """Decides whether a request should be retried.

    Args:
        max_retries: Maximum number of additional attempts after the
            first one.

    Example:
        ```pycon
        >>> import httpx
        >>> from snclient.retry import RetryDecider
        >>> decider = RetryDecider(max_retries=2)
        >>> decider.should_retry_exception(httpx.ConnectError("refused"), attempts=0)
        (True, 'ConnectError')
        >>> decider.should_retry_exception(httpx.ConnectError("refused"), attempts=2)
        (False, 'max retries exhausted')

        ```
    """

    def __init__(self, max_retries: int) -> None:
        self.max_retries = max_retries

    def is_transient(self, exception: Exception) -> bool:
        """Return ``True`` if the transport error is connect or timeout
        class."""
        return isinstance(exception, TRANSIENT_EXCEPTIONS)

    def should_retry_response(
        self,
        response: httpx.Response,
        attempts: int,
        url: str,
        method: str,
    ) -> tuple[bool, str]:
        """Determine if response should trigger retry.

        Args:
            response: The HTTP response to evaluate.
            attempts: Number of retries already performed.
            url: The URL being requested.
            method: The HTTP method being used.

        Returns:
            Tuple of (should_retry, reason). ``should_retry`` is ``False``
            only for a 2xx response, which ends the call.

        Raises:
            HttpStatusError: For a 4xx or other non-success status, or for
                a 5xx status once the retry budget is exhausted.
        """
        if response.is_success:
            return (False, "success")

        if response.is_server_error:
            if attempts < self.max_retries:
                return (True, f"status {response.status_code}")
            logger.debug(
                f"{method} request to {url} failed with status {response.status_code} "
                f"(max retries exhausted)"
            )
        else:
            logger.debug(
                f"{method} request to {url} failed with non-retryable status "
                f"{response.status_code}"
            )
        raise create_status_error(response, url=url, method=method, attempts=attempts + 1)

    def should_retry_exception(
        self,
        exception: Exception,
        attempts: int,
    ) -> tuple[bool, str]:
        """Determine if exception should trigger retry.

        Args:
            exception: The transport exception to evaluate.
            attempts: Number of retries already performed.

        Returns:
            Tuple of (should_retry, reason).
        """
        if attempts >= self.max_retries:
            return (False, "max retries exhausted")
        if not self.is_transient(exception):
            return (False, f"non-retryable {type(exception).__name__}")
        return (True, type(exception).__name__)
