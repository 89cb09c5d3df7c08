# src/site_urls/permalinks.py
"""Permalink pattern substitution.

Patterns such as ``/:year/:month/:slug/`` are filled in from a resource
mapping (a post or page). Date tokens use the resource's publication date
in the site's time zone.
"""

import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from .utils import parse_iso_datetime

# Used for :primary_author and :primary_tag when the resource has none
PRIMARY_FALLBACK = "all"

_TOKEN = re.compile(r":([a-z_]+)")


def _published_at(resource: Mapping[str, Any], timezone: str) -> datetime:
    value = resource.get("published_at")
    if isinstance(value, datetime):
        published = value if value.tzinfo else value.replace(tzinfo=UTC)
    else:
        published = parse_iso_datetime(value) or datetime.now(UTC)
    return published.astimezone(ZoneInfo(timezone))


def _slug_of(related: Any) -> str | None:
    if isinstance(related, Mapping):
        return related.get("slug")
    return None


def replace_permalink(permalink: str, resource: Mapping[str, Any], timezone: str = "UTC") -> str:
    """Replace ``:token`` placeholders in a permalink pattern.

    Supported tokens: year, month, day, slug, id, author, primary_author,
    primary_tag. Unknown tokens are left in place.

    Example:
        replace_permalink("/:year/:slug/", {"slug": "hello", "published_at": "2026-01-02"})
        # Result: '/2026/hello/'
    """
    published = _published_at(resource, timezone)

    lookup: dict[str, Callable[[], Any]] = {
        "year": lambda: published.strftime("%Y"),
        "month": lambda: published.strftime("%m"),
        "day": lambda: published.strftime("%d"),
        "author": lambda: _slug_of(resource.get("primary_author")),
        "primary_author": lambda: _slug_of(resource.get("primary_author")) or PRIMARY_FALLBACK,
        "primary_tag": lambda: _slug_of(resource.get("primary_tag")) or PRIMARY_FALLBACK,
        "slug": lambda: resource.get("slug"),
        "id": lambda: resource.get("id"),
    }

    def substitute(match: re.Match[str]) -> str:
        token = match.group(1)
        if token not in lookup:
            return match.group(0)
        value = lookup[token]()
        return "" if value is None else str(value)

    return _TOKEN.sub(substitute, permalink)
