r"""Asynchronous retry executor for HTTP requests.

This module provides the AsyncRetryExecutor class, the asyncio
counterpart of RetryExecutor. Backoff delays are awaited with
``asyncio.sleep`` so other calls keep running while one call waits.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx

from snclient.retry.decider import RetryDecider
from snclient.retry.executor_core import create_transport_error
from snclient.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from snclient.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async HTTP requests with automatic retry logic.

    The executor orchestrates the following components:
    - RetryStrategy: Calculates backoff delays between retries
    - RetryDecider: Determines whether to retry based on responses/exceptions

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
        >>> import asyncio
        >>> import httpx
        >>> from snclient.retry import AsyncRetryExecutor
        >>>
        >>> async def main():
        ...     executor = AsyncRetryExecutor(max_retries=3)
        ...     async with httpx.AsyncClient() as client:
        ...         return await executor.execute(
        ...             url="https://api.example.com/data",
        ...             method="GET",
        ...             build_request=lambda: client.build_request(
        ...                 "GET", "https://api.example.com/data"
        ...             ),
        ...             send=client.send,
        ...         )
        ...
        >>>
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self, max_retries: int, backoff_strategy: BaseBackoffStrategy | None = None
    ) -> None:
        self.max_retries = max_retries
        self.strategy: RetryStrategy = RetryStrategy(backoff_strategy)
        self.decider: RetryDecider = RetryDecider(max_retries)

    async def execute(
        self,
        url: str,
        method: str,
        build_request: Callable[[], httpx.Request],
        send: Callable[[httpx.Request], Awaitable[httpx.Response]],
    ) -> httpx.Response:
        """Execute async request with automatic retry logic.

        Attempts are strictly sequential: attempt n+1 starts only after
        attempt n was classified and its backoff delay has elapsed.

        Args:
            url: The URL being requested. Used for logging and errors.
            method: The HTTP method name. Used for logging and errors.
            build_request: Zero-argument callable returning a fresh,
                unsent request.
            send: Async callable sending a request and returning its
                response.

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
                response = await send(build_request())
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
            await asyncio.sleep(self.strategy.calculate_delay(attempts))
