r"""snclient - Resilient HTTP client bound to a single service.

This package provides a client handle that issues GET, POST, PUT, PATCH
and DELETE requests against a base URL, attaches credentials to every
request, and transparently retries failed requests with exponential
backoff. Built on top of the httpx library.

Key Features:
    - One retry policy shared by every HTTP verb
    - Server errors (5xx) and connect/timeout errors are retried
    - Client errors (4xx) and other transport errors fail immediately
    - Exponential backoff: 1s, 2s, 4s, ... before successive retries
    - Pluggable authentication: NoAuth, TokenAuth, OAuth
    - Synchronous and asyncio clients

Example:
    ```pycon
    >>> from snclient import SNClient, TokenAuth
    >>> with SNClient(
    ...     "https://api.example.com", max_retries=5, auth=TokenAuth("secret")
    ... ) as client:  # doctest: +SKIP
    ...     body = client.get("items")
    ...     body = client.post("items", {"key": "value"})
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncSNClient",
    "Authenticator",
    "ExponentialBackoff",
    "HttpRequestError",
    "HttpStatusError",
    "HttpTransportError",
    "NoAuth",
    "OAuth",
    "SNClient",
    "TokenAuth",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from snclient.auth import Authenticator, NoAuth, OAuth, TokenAuth
from snclient.backoff import ExponentialBackoff
from snclient.client import SNClient
from snclient.client_async import AsyncSNClient
from snclient.exceptions import HttpRequestError, HttpStatusError, HttpTransportError

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
