r"""Configuration defaults and validation shared by the sync and async
clients."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "validate_base_url",
    "validate_retry_params",
    "validate_timeout",
]

from snclient.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from snclient.core.validation import (
    validate_base_url,
    validate_retry_params,
    validate_timeout,
)
