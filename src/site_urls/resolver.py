# src/site_urls/resolver.py
"""URL creation for a site bound to one UrlConfig.

``UrlUtils`` is the entry point. It resolves contexts (home, admin, api,
image, nav, named paths, arbitrary relative URLs) to relative or absolute
URLs, making sure the sub-directory is honored exactly once and that
external URLs come back untouched.

Usage:
    urls = UrlUtils(UrlConfig(site_url="http://example.com/blog"))
    urls.url_for("home")                          # '/blog/'
    urls.url_for("home", True)                    # 'http://example.com/blog/'
    urls.url_for({"relative_url": "/about/"})     # '/blog/about/'
"""

import re
from collections.abc import Mapping
from typing import Any

from .api_paths import ApiPathResolver, ApiVersionError
from .config import ADMIN_PATH, UrlConfig
from .conversions import absolute_to_relative, is_ssl, relative_to_absolute
from .joiner import deduplicate_double_slashes, url_join
from .permalinks import replace_permalink
from .redirects import RedirectEmitter, RedirectResponse
from .site import SiteLocation
from .types import (
    KNOWN_PATHS,
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
from .url_resolver import HtmlAbsolutizer, RewrittenHtml
from .utils import log_error, log_op

# Already a URL of some kind: external, another scheme, protocol-less or an anchor
_EXTERNAL_URL = re.compile(r"^(//|#|[a-zA-Z0-9-]+:)")

_NAV_NOT_LOCAL = re.compile(r"\.|mailto:")


def is_external_reference(url_path: str) -> bool:
    """True for URLs that must not be joined onto the site URL."""
    return "://" in url_path or bool(_EXTERNAL_URL.match(url_path))


class UrlUtils:
    """Resolves URLs for one site configuration."""

    def __init__(self, config: UrlConfig) -> None:
        self._config = config
        self._site = SiteLocation(config)
        self._api = ApiPathResolver(config)
        self._absolutizer = HtmlAbsolutizer(config)
        self._redirects = RedirectEmitter(
            config,
            admin_url_for=lambda: self.url_for("admin"),
            join=self.url_join,
        )

    @property
    def config(self) -> UrlConfig:
        return self._config

    # =========================================================================
    # Site location
    # =========================================================================

    def get_site_url(self, secure: bool | None = None) -> str:
        return self._site.get_site_url(secure)

    def get_subdir(self) -> str:
        return self._site.get_subdir()

    def get_admin_url(self) -> str | None:
        return self._site.get_admin_url()

    def get_protected_slugs(self) -> list[str]:
        return self._site.get_protected_slugs()

    def get_api_path(self, version: str | None = None, version_type: str | None = None) -> str:
        return self._api.get_api_path(version, version_type)

    def get_version_path(
        self, version: str | None = None, version_type: str | None = None
    ) -> str:
        return self._api.get_version_path(version, version_type)

    @property
    def static_image_url_prefix(self) -> str:
        """Prefix images are served under, e.g. ``content/images``."""
        return self._config.static_image_url_prefix

    # =========================================================================
    # Path building
    # =========================================================================

    def url_join(self, *parts: str) -> str:
        """Join fragments into one URL/path, deduplicating slashes and sub-directory."""
        return url_join(parts, self.get_site_url())

    def create_url(
        self,
        url_path: str = "/",
        absolute: bool = False,
        secure: bool | None = None,
        trailing_slash: bool = False,
    ) -> str:
        """Create a URL from a path, honoring the sub-directory.

        Usage (with a /blog sub-directory):
            create_url("/", True)               # 'http://example.com/blog/'
            create_url("/welcome-to-ghost/")    # '/blog/welcome-to-ghost/'
        """
        base = self.get_site_url(secure) if absolute else self.get_subdir()

        if trailing_slash and not url_path.endswith("/"):
            url_path += "/"

        return self.url_join(base, url_path)

    # =========================================================================
    # Context resolution
    # =========================================================================

    def url_for(
        self,
        context: UrlContext | str | Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | bool | None = None,
        absolute: bool = False,
        *,
        secure: bool | None = None,
    ) -> str:
        """Create a URL for a context.

        Args:
            context: A context variant, a string tag ("home", "admin", "api",
                "image", "nav", "sitemap_xsl") or {"relative_url": ...}.
            data: Data for the context; a bool here is taken as ``absolute``.
            absolute: Return an absolute URL when possible.
            secure: Force https; a ``secure`` key in context or data wins.

        Returns:
            The URL. Unrecognized contexts give the site root and never raise.
        """
        # Make data properly optional
        if isinstance(data, bool):
            absolute = data
            data = None

        ctx, context_secure = parse_context(context, data)
        secure = context_secure or secure
        url_path = "/"

        if isinstance(ctx, RelativeUrl):
            url_path = ctx.path
            secure = ctx.secure or secure

        elif isinstance(ctx, Image):
            return self._image_url(ctx, absolute, ctx.secure or secure)

        elif isinstance(ctx, Nav):
            secure = ctx.secure or secure
            url_path, absolute = self._nav_path(ctx.url, absolute, secure)

        elif isinstance(ctx, Home):
            if absolute:
                url_path = self.get_site_url(secure)
                # Some callers (e.g. templates printing the site URL) need it without slash
                if not ctx.trailing_slash:
                    url_path = re.sub(r"/$", "", url_path)

        elif isinstance(ctx, Admin):
            url_path = self.get_admin_url() or self.get_site_url()
            url_path = url_path + ADMIN_PATH if absolute else f"/{ADMIN_PATH}"

        elif isinstance(ctx, Api):
            url_path = self._api_url(ctx, absolute)

        elif isinstance(ctx, NamedPath):
            url_path = KNOWN_PATHS.get(ctx.name, "/")

        elif isinstance(ctx, Unrecognized) and ctx.raw:
            log_op("url_context_unrecognized", context=ctx.raw)

        if url_path and is_external_reference(url_path):
            return url_path

        return self.create_url(url_path or "/", absolute, secure)

    def _image_url(self, ctx: Image, absolute: bool, secure: bool | None) -> str:
        """Image paths never gain a trailing slash, so they skip create_url."""
        url_path = ctx.image
        subdir = self.get_subdir()

        # Only images served from the static image prefix can be made absolute
        if not url_path.startswith(f"{subdir}/{self._config.static_image_url_prefix}"):
            return url_path

        if absolute:
            # The site URL brings the sub-directory back
            if subdir:
                url_path = url_path[len(subdir) :]
            base_url = re.sub(r"/$", "", self.get_site_url(secure))
            url_path = base_url + url_path

        return url_path

    def _nav_path(self, url_path: str, absolute: bool, secure: bool | None) -> tuple[str, bool]:
        """Make nav URLs on this site host-relative and force them absolute.

        Stored nav items keep whatever scheme the site had when they were
        saved; rebuilding them from the current site URL fixes mismatches.
        """
        hostname = self.get_site_url(secure).split("//")[1]

        if hostname not in url_path:
            return url_path, absolute

        before, after = url_path.split(hostname)[:2]
        # Not for sub-domains, mailto links or URLs with a port after the host
        if _NAV_NOT_LOCAL.search(before) or after.startswith(":"):
            return url_path, absolute

        return self.url_join("/", after), True

    def _api_url(self, ctx: Api, absolute: bool) -> str:
        url_path = self.get_admin_url() or self.get_site_url()
        try:
            api_path = self.get_api_path(ctx.version, ctx.version_type)
        except ApiVersionError as e:
            log_error(
                "api_path_lookup_error",
                e,
                version=ctx.version,
                version_type=ctx.version_type,
            )
            raise

        # Cross-origin callers may use either scheme against an http site
        if ctx.cors and not url_path.startswith("https:"):
            url_path = re.sub(r"^.*?://", "//", url_path)

        if absolute:
            return re.sub(r"/$", "", url_path) + api_path
        return api_path

    # =========================================================================
    # Redirects
    # =========================================================================

    def redirect_301(self, response: RedirectResponse, redirect_url: str) -> Any:
        """Permanent redirect with a public Cache-Control header."""
        return self._redirects.redirect_301(response, redirect_url)

    def redirect_to_admin(self, status: int, response: RedirectResponse, admin_path: str) -> Any:
        return self._redirects.redirect_to_admin(status, response, admin_path)

    # =========================================================================
    # Content and link conversion
    # =========================================================================

    def make_absolute_urls(
        self,
        html: str | None,
        site_url: str,
        item_url: str | None,
        assets_only: bool = False,
    ) -> RewrittenHtml:
        """Convert relative href/src values in HTML to absolute URLs."""
        return self._absolutizer.absolutize(html, site_url, item_url, assets_only=assets_only)

    def absolute_to_relative(self, url: str, **options: Any) -> str:
        return absolute_to_relative(url, self.get_site_url(), **options)

    def relative_to_absolute(self, url: str, **options: Any) -> str:
        return relative_to_absolute(url, self.get_site_url(), **options)

    # Standalone helpers, exposed for callers that only hold a UrlUtils
    is_ssl = staticmethod(is_ssl)
    replace_permalink = staticmethod(replace_permalink)
    deduplicate_double_slashes = staticmethod(deduplicate_double_slashes)
