r"""Synchronous retry executor for HTTP requests.

This module provides the RetryExecutor class that runs one logical call:
it builds and sends a fresh request per attempt, classifies the outcome
and waits out the backoff delay before each retry.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING

import httpx

from snclient.retry.decider import RetryDecider
from snclient.retry.executor_core import create_transport_error
from snclient.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from snclient.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes HTTP requests with automatic retry logic.

    The executor holds no per-call state, so a single instance can serve
    any number of calls, including calls made from several threads.

    Args:
        max_retries: Maximum number of additional attempts after the
            first one.
        backoff_strategy: Optional backoff strategy. Defaults to
            ``ExponentialBackoff()``.

    Attributes:
        max_retries: Maximum number of additional attempts.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import httpx
        >>> from snclient.retry import RetryExecutor
        >>> executor = RetryExecutor(max_retries=3)
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     response = executor.execute(
        ...         url="https://api.example.com/data",
        ...         method="GET",
        ...         build_request=lambda: client.build_request("GET", "https://api.example.com/data"),
        ...         send=client.send,
        ...     )
        ...

        ```
    """

    def __init__(
        self, max_retries: int, backoff_strategy: BaseBackoffStrategy | None = None
    ) -> None:
        self.max_retries = max_retries
        self.strategy: RetryStrategy = RetryStrategy(backoff_strategy)
        self.decider: RetryDecider = RetryDecider(max_retries)

    def execute(
        self,
        url: str,
        method: str,
        build_request: Callable[[], httpx.Request],
        send: Callable[[httpx.Request], httpx.Response],
    ) -> httpx.Response:
        """Execute request with automatic retry logic.

        Attempts the request up to max_retries + 1 times. A new request is
        built for every attempt since a sent request cannot be replayed.

        The retry loop handles:
        - 2xx responses: Returns immediately
        - 5xx responses: Retries with backoff while budget remains
        - 4xx and other non-success responses: Raises immediately
        - Connect and timeout errors: Retries with backoff while budget remains
        - Other transport errors (e.g. malformed URL): Raises immediately

        Args:
            url: The URL being requested. Used for logging and errors.
            method: The HTTP method name. Used for logging and errors.
            build_request: Zero-argument callable returning a fresh,
                unsent request.
            send: Callable sending a request and returning its response.

        Returns:
            The successful HTTP response.

        Raises:
            HttpStatusError: If the final response has a non-success status.
            HttpTransportError: If the final attempt failed at the
                transport layer.
        """
        attempts = 0
        while True:
            try:
                response = send(build_request())
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                should_retry, reason = self.decider.should_retry_exception(exc, attempts)
                if not should_retry:
                    logger.debug(
                        f"{method} request to {url} encountered {type(exc).__name__} on "
                        f"attempt {attempts + 1}/{self.max_retries + 1}: {exc}"
                    )
                    raise create_transport_error(
                        exc,
                        url=url,
                        method=method,
                        attempts=attempts + 1,
                        transient=self.decider.is_transient(exc),
                    ) from exc
            else:
                should_retry, reason = self.decider.should_retry_response(
                    response, attempts, url=url, method=method
                )
                if not should_retry:
                    return response

            attempts += 1
            logger.debug(f"{method} to {url}: will retry ({reason})")
            time.sleep(self.strategy.calculate_delay(attempts))
