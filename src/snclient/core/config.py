r"""Configuration dataclass and defaults for the snclient clients.

This module provides configuration constants and the immutable
configuration object shared by ``SNClient`` and ``AsyncSNClient``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
]

from dataclasses import dataclass

from snclient.core.validation import validate_base_url, validate_retry_params

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Delay in seconds before the first retry
# Wait time = base_delay * (2 ** (retry - 1))
# With 1.0: 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_BASE_DELAY = 1.0

# Default timeout in seconds for a single HTTP attempt
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration of a client handle.

    Args:
        base_url: The URL every endpoint is appended to, separated by
            a literal ``/``.
        max_retries: Maximum number of additional attempts after the
            first one. Must be >= 0.

    Note:
        The timeout is NOT included in this config. It belongs to the
        ``httpx`` client that sends the requests, which may be supplied
        by the caller.

    Example:
        ```pycon
        >>> from snclient.core.config import ClientConfig
        >>> config = ClientConfig(base_url="https://api.example.com")
        >>> config.max_retries
        3

        ```
    """

    base_url: str
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_base_url(self.base_url)
        validate_retry_params(max_retries=self.max_retries)
