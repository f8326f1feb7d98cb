r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from snclient.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 1.0
    assert backoff.max_delay is None
    assert backoff.calculate(0) == 1.0


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=1.0)
    assert backoff.calculate(0) == 1.0  # 1.0 * 2^0
    assert backoff.calculate(1) == 2.0  # 1.0 * 2^1
    assert backoff.calculate(2) == 4.0  # 1.0 * 2^2
    assert backoff.calculate(3) == 8.0  # 1.0 * 2^3


def test_exponential_backoff_unbounded_by_default() -> None:
    assert ExponentialBackoff().calculate(20) == 1048576.0


def test_exponential_backoff_negative_attempt_clamped() -> None:
    assert ExponentialBackoff(base_delay=2.0).calculate(-1) == 2.0


def test_exponential_backoff_with_max_delay() -> None:
    """Test exponential backoff with max_delay cap."""
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 5.0  # Would be 8.0, but capped
    assert backoff.calculate(10) == 5.0  # Would be 1024.0, but capped


def test_exponential_backoff_zero_base_delay() -> None:
    backoff = ExponentialBackoff(base_delay=0.0)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(5) == 0.0


def test_exponential_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-1.0)


@pytest.mark.parametrize("max_delay", [0, -5.0])
def test_exponential_backoff_invalid_max_delay(max_delay: float) -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        ExponentialBackoff(base_delay=1.0, max_delay=max_delay)


def test_exponential_backoff_repr() -> None:
    assert repr(ExponentialBackoff()) == "ExponentialBackoff(base_delay=1.0, max_delay=None)"
