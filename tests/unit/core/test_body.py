r"""Unit tests for request body encoding."""

from __future__ import annotations

import json

import pytest

from snclient import HttpTransportError
from snclient.core.body import encode_json_body

URL = "https://api.example.com/items"


######################################
#     Tests for encode_json_body     #
######################################


def test_encode_json_body_none() -> None:
    assert encode_json_body(None, url=URL, method="GET") == (None, {})


@pytest.mark.parametrize(
    "body", [{"name": "widget", "count": 2}, [1, 2, 3], "text", 0, False, {"city": "Zürich"}]
)
def test_encode_json_body_valid(body: object) -> None:
    content, headers = encode_json_body(body, url=URL, method="POST")
    assert json.loads(content) == body
    assert headers == {"Content-Type": "application/json"}


def test_encode_json_body_unsupported_type() -> None:
    with pytest.raises(HttpTransportError, match=r"not JSON serializable") as exc_info:
        encode_json_body({"when": object()}, url=URL, method="POST")

    assert exc_info.value.method == "POST"
    assert exc_info.value.url == URL
    assert exc_info.value.attempts == 1
    assert not exc_info.value.transient
    assert isinstance(exc_info.value.__cause__, TypeError)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_encode_json_body_non_finite_float(value: float) -> None:
    with pytest.raises(HttpTransportError) as exc_info:
        encode_json_body({"value": value}, url=URL, method="PUT")
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_encode_json_body_circular_reference() -> None:
    body: dict[str, object] = {}
    body["self"] = body
    with pytest.raises(HttpTransportError) as exc_info:
        encode_json_body(body, url=URL, method="PATCH")
    assert isinstance(exc_info.value.__cause__, ValueError)
