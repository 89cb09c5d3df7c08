# src/site_urls/redirects.py
"""Redirect issuance against a caller-supplied response object.

The response only needs ``set(headers)`` and ``redirect(url, status)``.
``HttpxRedirectResponse`` is a ready-made implementation that produces an
``httpx.Response``.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

import httpx

from .config import DEFAULT_REDIRECT_CACHE_MAX_AGE, UrlConfig
from .observability import RedirectEvent, emit_event


class RedirectResponse(Protocol):
    """What RedirectEmitter needs from a response."""

    def set(self, headers: Mapping[str, str]) -> None: ...

    def redirect(self, url: str, status: int = 302) -> Any: ...


class HttpxRedirectResponse:
    """Collects headers and builds an ``httpx.Response`` on redirect."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.response: httpx.Response | None = None

    def set(self, headers: Mapping[str, str]) -> None:
        self.headers.update(headers)

    def redirect(self, url: str, status: int = 302) -> httpx.Response:
        self.response = httpx.Response(status, headers={**self.headers, "Location": url})
        return self.response


def build_cache_control(max_age: int | None) -> str:
    """Build the Cache-Control value sent with permanent redirects."""
    if max_age is None:
        max_age = DEFAULT_REDIRECT_CACHE_MAX_AGE
    return f"public, max-age={max_age}"


class RedirectEmitter:
    """Issues 301/302 redirects; only 301s carry a cache header.

    ``admin_url_for`` returns the relative admin URL and ``join`` joins URL
    fragments; both come from the UrlUtils this emitter belongs to.
    """

    def __init__(
        self,
        config: UrlConfig,
        admin_url_for: Callable[[], str],
        join: Callable[..., str],
    ) -> None:
        self._config = config
        self._admin_url_for = admin_url_for
        self._join = join

    def redirect_301(
        self, response: RedirectResponse, redirect_url: str, target: str = "path"
    ) -> Any:
        cache_control = build_cache_control(self._config.redirect_cache_max_age)
        response.set({"Cache-Control": cache_control})
        emit_event(
            RedirectEvent(
                status_code=301,
                location=redirect_url,
                target=target,
                cache_control=cache_control,
            )
        )
        return response.redirect(redirect_url, 301)

    def redirect_to_admin(self, status: int, response: RedirectResponse, admin_path: str) -> Any:
        """Redirect to a path inside the admin client, e.g. ``#/settings``."""
        redirect_url = self._join(self._admin_url_for(), admin_path, "/")

        if status == 301:
            return self.redirect_301(response, redirect_url, target="admin")

        emit_event(RedirectEvent(status_code=302, location=redirect_url, target="admin"))
        return response.redirect(redirect_url)
