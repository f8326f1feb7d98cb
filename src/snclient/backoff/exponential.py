r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from snclient.backoff.base import BaseBackoffStrategy
from snclient.core.config import DEFAULT_BASE_DELAY


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt). The delay grows
    without bound unless ``max_delay`` is given. No jitter is applied.

    Args:
        base_delay: The delay in seconds before the first retry
            (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from snclient.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff()
        >>> backoff.calculate(0)  # First retry
        1.0
        >>> backoff.calculate(1)  # Second retry
        2.0
        >>> backoff.calculate(2)  # Third retry
        4.0
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(10)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(
        self, base_delay: float = DEFAULT_BASE_DELAY, max_delay: float | None = None
    ) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The retry number (0-indexed). Negative values are
                treated as 0.

        Returns:
            The calculated delay: base_delay * (2 ** attempt),
            capped at max_delay if set.
        """
        delay = self.base_delay * (2 ** max(attempt, 0))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
