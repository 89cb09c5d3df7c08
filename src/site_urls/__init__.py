# src/site_urls/__init__.py
"""URL resolution for sites served from a sub-directory.

Resolves logical references (home, admin, API roots, images, navigation
items, arbitrary paths) to relative or absolute URLs, and rewrites relative
links in HTML to absolute ones.
"""

from .api_paths import ApiPathResolver, ApiVersionError
from .config import UrlConfig, config_from_env
from .conversions import absolute_to_relative, is_ssl, relative_to_absolute
from .joiner import deduplicate_double_slashes, deduplicate_subdirectory, url_join
from .permalinks import replace_permalink
from .redirects import HttpxRedirectResponse, RedirectEmitter, RedirectResponse
from .resolver import UrlUtils
from .site import SiteLocation
from .types import (
    Admin,
    Api,
    Home,
    Image,
    NamedPath,
    Nav,
    RelativeUrl,
    Unrecognized,
    UrlContext,
    parse_context,
)
from .url_resolver import HtmlAbsolutizer, RewrittenHtml, should_absolutize

__all__ = [
    "Admin",
    "Api",
    "ApiPathResolver",
    "ApiVersionError",
    "Home",
    "HtmlAbsolutizer",
    "HttpxRedirectResponse",
    "Image",
    "NamedPath",
    "Nav",
    "RedirectEmitter",
    "RedirectResponse",
    "RelativeUrl",
    "RewrittenHtml",
    "SiteLocation",
    "Unrecognized",
    "UrlConfig",
    "UrlContext",
    "UrlUtils",
    "absolute_to_relative",
    "config_from_env",
    "deduplicate_double_slashes",
    "deduplicate_subdirectory",
    "is_ssl",
    "parse_context",
    "relative_to_absolute",
    "replace_permalink",
    "should_absolutize",
    "url_join",
]
