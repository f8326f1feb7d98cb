r"""JSON encoding of request bodies.

The body is encoded once per call, before the first attempt, so an
unserializable body is reported as a typed error and never retried.
"""

from __future__ import annotations

__all__ = ["encode_json_body"]

import json
import logging
from typing import Any

from snclient.exceptions import HttpTransportError

logger: logging.Logger = logging.getLogger(__name__)


def encode_json_body(body: Any, url: str, method: str) -> tuple[bytes | None, dict[str, str]]:
    """Encode a request body as JSON.

    Args:
        body: The JSON-serializable body, or ``None`` for no body.
        url: The URL being requested, used in error messages.
        method: The HTTP method being used, used in error messages.

    Returns:
        A tuple ``(content, headers)``. Both are empty when ``body`` is
            ``None``.

    Raises:
        HttpTransportError: If ``body`` cannot be serialized to JSON
            (unsupported type, circular reference, NaN or infinity).

    Example:
        ```pycon
        >>> from snclient.core.body import encode_json_body
        >>> encode_json_body({"a": 1}, "https://api.example.com/items", "POST")
        (b'{"a":1}', {'Content-Type': 'application/json'})
        >>> encode_json_body(None, "https://api.example.com/items", "GET")
        (None, {})

        ```
    """
    if body is None:
        return None, {}
    try:
        content = json.dumps(
            body, ensure_ascii=False, separators=(",", ":"), allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.debug(f"{method} request to {url}: body is not JSON serializable: {exc}")
        msg = f"{method} request to {url} failed: body is not JSON serializable: {exc}"
        raise HttpTransportError(
            method=method, url=url, message=msg, attempts=1, cause=exc
        ) from exc
    return content, {"Content-Type": "application/json"}
