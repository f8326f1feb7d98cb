r"""Retry strategy for calculating backoff delays."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from snclient.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from snclient.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating the wait before a retry.

    Args:
        backoff_strategy: Backoff strategy instance. Defaults to
            ``ExponentialBackoff()``, i.e. 1s, 2s, 4s, ...

    Example:
        ```pycon
        >>> from snclient.retry import RetryStrategy
        >>> strategy = RetryStrategy()
        >>> [strategy.calculate_delay(attempts) for attempts in (1, 2, 3)]
        [1.0, 2.0, 4.0]

        ```
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy | None = None) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ExponentialBackoff()
        )

    def calculate_delay(self, attempts: int) -> float:
        """Calculate delay before the next retry.

        Args:
            attempts: Retry counter after it was incremented for the
                upcoming retry (1 for the first retry). Zero is treated
                like 1.

        Returns:
            Sleep time in seconds.
        """
        sleep_time = self.backoff_strategy.calculate(max(attempts - 1, 0))
        logger.debug(f"Waiting {sleep_time:.2f}s before retry {attempts}")
        return sleep_time
