# src/site_urls/joiner.py
"""Joining of URL and path fragments.

``url_join`` concatenates fragments with single slashes, keeps the ``://``
of a scheme and the ``//`` of a schemeless URL, and removes one doubled
occurrence of the site's sub-directory.
"""

import re
from collections.abc import Sequence
from urllib.parse import urlparse

# Any run of 2+ slashes that does not follow a colon
_MULTIPLE_SLASHES = re.compile(r"(^|[^:])//+")


def deduplicate_double_slashes(url: str) -> str:
    """Collapse duplicated slashes, leaving a scheme's ``://`` alone."""
    return _MULTIPLE_SLASHES.sub(r"\1/", url)


def deduplicate_subdirectory(url: str, site_url: str) -> str:
    """Collapse ``/blog/blog/`` into ``/blog/`` for a site served from /blog.

    Only matches that start at a slash or at the beginning of the string
    count, so a sub-directory equal to a host label (``ghost.blog/blog``)
    is never stripped from the host.
    """
    if not site_url.endswith("/"):
        site_url = f"{site_url}/"

    path = urlparse(site_url).path
    if path in ("", "/"):
        return url

    subdir = path.strip("/")
    escaped = re.escape(subdir)
    pattern = re.compile(rf"(^|/){escaped}/{escaped}(/|$)")
    return pattern.sub(lambda m: f"{m.group(1)}{subdir}{m.group(2)}", url, count=1)


def url_join(parts: Sequence[str], site_url: str) -> str:
    """Join path/URL fragments into one normalized string.

    Example:
        url_join(["http://example.com/", "/rss"], "http://example.com/")
        # Result: 'http://example.com/rss'
    """
    parts = list(parts)

    # Remove empty item at the beginning
    if parts and parts[0] == "":
        parts.pop(0)
    if not parts:
        return ""

    # Handle schemeless protocols
    prefix_double_slash = parts[0].startswith("//")

    url = deduplicate_double_slashes("/".join(parts))

    # Put the double slash back at the beginning if this was a schemeless protocol
    if prefix_double_slash:
        url = re.sub(r"^/", "//", url)

    return deduplicate_subdirectory(url, site_url)
