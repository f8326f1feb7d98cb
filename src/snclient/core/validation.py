r"""Parameter validation utilities for the client configuration.

Each function raises ``ValueError`` with a descriptive message when its
parameter does not meet the required constraints.
"""

from __future__ import annotations

__all__ = ["validate_base_url", "validate_retry_params", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_base_url(base_url: str) -> None:
    """Validate the base URL of a client.

    Only emptiness is checked here. A malformed URL is reported by the
    transport on the first attempt and is never retried.

    Args:
        base_url: The URL endpoints are appended to.

    Raises:
        ValueError: If ``base_url`` is empty.

    Example:
        ```pycon
        >>> from snclient.core.validation import validate_base_url
        >>> validate_base_url("https://api.example.com")
        >>> validate_base_url("")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: base_url must not be empty

        ```
    """
    if not base_url:
        msg = "base_url must not be empty"
        raise ValueError(msg)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from snclient.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(max_retries: int) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts for failed requests.
            Must be an integer >= 0. A value of 0 means no retries (only
            the initial attempt).

    Raises:
        ValueError: If max_retries is not an integer or is negative.
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an integer, got {max_retries!r}"
        raise ValueError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
