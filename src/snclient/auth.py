r"""Authentication strategies applied to outgoing requests.

An authenticator decorates an unsent ``httpx.Request`` with credentials.
It never performs network I/O and holds nothing but an immutable
credential, so a single instance can be shared by every call of a client,
including concurrent ones.

Example:
    ```pycon
    >>> import httpx
    >>> from snclient.auth import TokenAuth
    >>> request = httpx.Request("GET", "https://api.example.com/items")
    >>> request = TokenAuth("secret").authenticate(request)
    >>> request.headers["Authorization"]
    'Bearer secret'

    ```
"""

from __future__ import annotations

__all__ = ["Authenticator", "NoAuth", "OAuth", "TokenAuth"]

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

AUTHORIZATION_HEADER = "Authorization"


class Authenticator(ABC):
    """Abstract base class for credential attachment strategies."""

    __slots__ = ()

    @abstractmethod
    def authenticate(self, request: httpx.Request) -> httpx.Request:
        """Attach credentials to an outgoing request.

        Args:
            request: The unsent request.

        Returns:
            The request with credentials attached.
        """


@dataclass(frozen=True)
class NoAuth(Authenticator):
    """Authenticator that leaves the request untouched.

    Example:
        ```pycon
        >>> import httpx
        >>> from snclient.auth import NoAuth
        >>> request = httpx.Request("GET", "https://api.example.com/items")
        >>> "Authorization" in NoAuth().authenticate(request).headers
        False

        ```
    """

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        return request


@dataclass(frozen=True)
class TokenAuth(Authenticator):
    """Authenticator attaching a static bearer token.

    Args:
        token: The bearer token. Must not be empty.

    Raises:
        ValueError: If ``token`` is empty.
    """

    token: str

    def __post_init__(self) -> None:
        if not self.token:
            msg = "token must not be empty"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(token='***')"

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {self.token}"
        return request


@dataclass(frozen=True)
class OAuth(Authenticator):
    """Authenticator attaching an OAuth 2.0 access token.

    The token is sent in the ``Authorization`` header as
    ``<token_type> <access_token>``. The token type defaults to
    ``Bearer`` and can be changed for services that expect another
    scheme name.

    Args:
        access_token: The OAuth access token. Must not be empty.
        token_type: The authorization scheme name. Must not be empty.

    Raises:
        ValueError: If ``access_token`` or ``token_type`` is empty.

    Example:
        ```pycon
        >>> import httpx
        >>> from snclient.auth import OAuth
        >>> request = httpx.Request("GET", "https://api.example.com/items")
        >>> OAuth("abc123").authenticate(request).headers["Authorization"]
        'Bearer abc123'

        ```
    """

    access_token: str
    token_type: str = "Bearer"

    def __post_init__(self) -> None:
        if not self.access_token:
            msg = "access_token must not be empty"
            raise ValueError(msg)
        if not self.token_type:
            msg = "token_type must not be empty"
            raise ValueError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(access_token='***', token_type={self.token_type!r})"

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        request.headers[AUTHORIZATION_HEADER] = f"{self.token_type} {self.access_token}"
        return request
