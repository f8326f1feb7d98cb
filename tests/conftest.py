from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator, Sequence

BASE_URL = "https://api.example.com"


class SequenceHandler:
    r"""``httpx.MockTransport`` handler replaying a fixed list of outcomes.

    Each outcome is either a status code, an ``httpx.Response`` or an
    exception class. Exceptions are instantiated with the incoming
    request and raised. The last outcome is repeated once the list is
    exhausted. Every received request is recorded in ``requests``.
    """

    def __init__(self, outcomes: Sequence[int | httpx.Response | type[Exception]]) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, int):
            return httpx.Response(outcome, text=f"body {outcome}")
        if isinstance(outcome, httpx.Response):
            return outcome
        raise outcome("simulated failure", request=request)


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def request_factory() -> Mock:
    """Create a mock zero-argument request factory returning a new
    request on every call."""
    return Mock(side_effect=lambda: httpx.Request("GET", f"{BASE_URL}/items"))


@pytest.fixture
def sequence_handler() -> type[SequenceHandler]:
    """Return the handler class used to script transport outcomes."""
    return SequenceHandler
