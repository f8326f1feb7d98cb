r"""Backoff strategies for computing retry delays."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExponentialBackoff"]

from snclient.backoff.base import BaseBackoffStrategy
from snclient.backoff.exponential import ExponentialBackoff
