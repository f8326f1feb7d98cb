r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import snclient


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(snclient.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in snclient.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in snclient.__all__:
        assert hasattr(snclient, name), f"{name} is in __all__ but not defined in module"


@pytest.mark.parametrize(
    "name",
    [
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
    ],
)
def test_public_classes_exported(name: str) -> None:
    assert name in snclient.__all__
    assert isinstance(getattr(snclient, name), type)


def test_exception_hierarchy() -> None:
    assert issubclass(snclient.HttpStatusError, snclient.HttpRequestError)
    assert issubclass(snclient.HttpTransportError, snclient.HttpRequestError)
    assert issubclass(snclient.HttpRequestError, Exception)
