# tests/conftest.py
"""Shared fixtures for site-urls tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path so tests run without an installed package
_src_path = str(Path(__file__).parent.parent / "src")
if _src_path not in sys.path:
    sys.path.insert(0, _src_path)

from site_urls.config import UrlConfig  # noqa: E402
from site_urls.resolver import UrlUtils  # noqa: E402

# =============================================================================
# Shared Test Constants
# =============================================================================

DEFAULT_API_VERSIONS = {
    "all": ["v0.1", "v2"],
    "v2": {
        "admin": "v2/admin",
        "content": "v2/content",
        "members": "v2/members",
    },
    "v0.1": {
        "admin": "v0.1",
        "content": "v0.1",
    },
}


# =============================================================================
# Mocks
# =============================================================================


class MockRedirectResponse:
    """Records what a RedirectEmitter does to a response."""

    def __init__(self) -> None:
        self.set_calls: list[dict[str, str]] = []
        self.redirects: list[tuple[str, int]] = []

    def set(self, headers: dict[str, str]) -> None:
        self.set_calls.append(dict(headers))

    def redirect(self, url: str, status: int = 302) -> str:
        self.redirects.append((url, status))
        return url


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def make_urls():
    """Factory for UrlUtils bound to a config built from keyword arguments."""

    def _make(site_url: str = "http://my-ghost-blog.com", **options: Any) -> UrlUtils:
        return UrlUtils(UrlConfig(site_url=site_url, **options))

    return _make


@pytest.fixture
def urls(make_urls) -> UrlUtils:
    """UrlUtils for a root-served http site."""
    return make_urls()


@pytest.fixture
def subdir_urls(make_urls) -> UrlUtils:
    """UrlUtils for a site served from /blog."""
    return make_urls("http://my-ghost-blog.com/blog")


@pytest.fixture
def api_versions() -> dict:
    return DEFAULT_API_VERSIONS


@pytest.fixture
def redirect_response() -> MockRedirectResponse:
    return MockRedirectResponse()
