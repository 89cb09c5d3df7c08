# src/site_urls/types.py
"""Context variants accepted by ``UrlUtils.url_for``.

A context describes what kind of reference is being resolved. Callers may
pass one of the dataclasses below directly, or the loose shapes templates
and stored data tend to produce (a string tag, a mapping, ``None``), which
``parse_context`` normalizes into exactly one variant.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

ApiVersionType = Literal["admin", "content", "members"]

# Named paths that resolve to a fixed location below the site root
KNOWN_PATHS: dict[str, str] = {
    "home": "/",
    "sitemap_xsl": "/sitemap.xsl",
}


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class Home:
    """The site root. ``trailing_slash=False`` only affects absolute URLs."""

    trailing_slash: bool = True


@dataclass(frozen=True, slots=True)
class Admin:
    """The admin client."""


@dataclass(frozen=True, slots=True)
class Api:
    """An API root for a version and version type."""

    version: str | None = None
    version_type: ApiVersionType | str | None = None
    cors: bool = False


@dataclass(frozen=True, slots=True)
class Image:
    """An image path, absolutized only when it lives under the static image prefix."""

    image: str
    secure: bool | None = None


@dataclass(frozen=True, slots=True)
class Nav:
    """A navigation item URL as stored in site settings."""

    url: str
    secure: bool | None = None


@dataclass(frozen=True, slots=True)
class NamedPath:
    name: str


@dataclass(frozen=True, slots=True)
class RelativeUrl:
    """An arbitrary path below the site root."""

    path: str
    secure: bool | None = None


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Anything else. Resolves to the site root."""

    raw: str = ""


UrlContext = Home | Admin | Api | Image | Nav | NamedPath | RelativeUrl | Unrecognized

_VARIANT_TYPES = (Home, Admin, Api, Image, Nav, NamedPath, RelativeUrl, Unrecognized)


# =============================================================================
# Normalization
# =============================================================================


def _get(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, Mapping) else None


def _get_str(data: Any, key: str) -> str | None:
    """Like ``_get``, but anything other than a non-empty string reads as unset."""
    value = _get(data, key)
    return value if value and isinstance(value, str) else None


def parse_context(context: Any, data: Any = None) -> tuple[UrlContext, bool | None]:
    """Normalize a loose context/data pair into a variant and a secure flag.

    The secure flag is read from the context mapping first, then from data.
    Never raises: shapes that don't describe a known variant become
    ``Unrecognized``.
    """
    secure = _get(context, "secure") or _get(data, "secure") or None

    if isinstance(context, _VARIANT_TYPES):
        return context, secure

    if isinstance(context, Mapping):
        relative_url = context.get("relative_url")
        if relative_url and isinstance(relative_url, str):
            return RelativeUrl(relative_url, secure=secure), secure
        return Unrecognized(), secure

    if not isinstance(context, str):
        return Unrecognized(), secure

    if context == "home":
        return Home(trailing_slash=_get(data, "trailing_slash") is not False), secure

    if context == "admin":
        return Admin(), secure

    if context == "api":
        return (
            Api(
                version=_get_str(data, "version"),
                version_type=_get_str(data, "version_type"),
                cors=bool(_get(data, "cors")),
            ),
            secure,
        )

    if context == "image":
        image = _get(data, "image")
        if image and isinstance(image, str):
            return Image(image, secure=secure), secure
        return Unrecognized(context), secure

    if context == "nav":
        nav = _get(data, "nav")
        url = _get(nav, "url")
        if url and isinstance(url, str):
            return Nav(url, secure=_get(nav, "secure")), secure
        return Unrecognized(context), secure

    if context in KNOWN_PATHS:
        return NamedPath(context), secure

    return Unrecognized(context), secure
