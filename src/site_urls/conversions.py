# src/site_urls/conversions.py
"""Conversions between absolute and relative forms of single URLs."""

import re
from urllib.parse import urljoin, urlparse, urlunparse

from .config import DEFAULT_STATIC_IMAGE_URL_PREFIX
from .joiner import url_join
from .url_resolver import should_absolutize

# Scratch origin used to resolve paths without a real host
_RELATIVE_ORIGIN = "http://relative"


def is_ssl(url: str) -> bool:
    """Return True when the URL uses https."""
    return urlparse(url).scheme == "https"


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


def absolute_to_relative(
    url: str,
    site_url: str,
    *,
    ignore_protocol: bool = True,
    without_subdirectory: bool = False,
    assets_only: bool = False,
    static_image_url_prefix: str = DEFAULT_STATIC_IMAGE_URL_PREFIX,
) -> str:
    """Turn an absolute URL on this site into a root-relative path.

    URLs that are already relative, on another host, outside the site's
    sub-directory or (when ignore_protocol is off) on another scheme are
    returned unchanged.
    """
    if assets_only and static_image_url_prefix not in url:
        return url

    try:
        parsed = urlparse(url)
    except ValueError:
        return url

    if not parsed.netloc:
        return url

    root = urlparse(_with_trailing_slash(site_url))
    if parsed.netloc != root.netloc:
        return url
    if not ignore_protocol and parsed.scheme != root.scheme:
        return url

    root_path = root.path[:-1]
    if root_path and not re.match(rf"^{re.escape(root_path)}(/|$)", parsed.path):
        return url

    path = parsed.path or "/"
    if without_subdirectory and root_path:
        path = path[len(root_path) :] or "/"

    return urlunparse(("", "", path, parsed.params, parsed.query, parsed.fragment))


def relative_to_absolute(
    url: str,
    site_url: str,
    *,
    item_path: str | None = None,
    assets_only: bool = False,
    static_image_url_prefix: str = DEFAULT_STATIC_IMAGE_URL_PREFIX,
    secure: bool = False,
) -> str:
    """Turn a relative URL into an absolute URL on this site.

    Root-relative paths resolve against the site URL, other relative paths
    against ``item_path``. The site's sub-directory appears exactly once.
    """
    if not should_absolutize(
        url, assets_only=assets_only, static_image_url_prefix=static_image_url_prefix
    ):
        return url

    site_url = _with_trailing_slash(site_url)
    root = urlparse(site_url)

    base_path = "" if url.startswith("/") else (item_path or "/")
    resolved = urlparse(urljoin(f"{_RELATIVE_ORIGIN}{base_path}", url))
    path = url_join([root.path, resolved.path], site_url)

    scheme = "https" if secure else root.scheme
    return urlunparse((scheme, root.netloc, path, resolved.params, resolved.query, resolved.fragment))
