r"""Retry engine shared by every HTTP verb.

Public API:
    - RetryStrategy: Strategy for calculating retry delays
    - RetryDecider: Logic for deciding whether to retry
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "TRANSIENT_EXCEPTIONS",
    "AsyncRetryExecutor",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
]

from snclient.retry.decider import TRANSIENT_EXCEPTIONS, RetryDecider
from snclient.retry.executor import RetryExecutor
from snclient.retry.executor_async import AsyncRetryExecutor
from snclient.retry.strategy import RetryStrategy
