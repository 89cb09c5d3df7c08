# src/site_urls/site.py
"""Site and admin base URL derivation.

The configured site URL is the only stored location. The sub-directory,
the admin base and the protected slug list are all derived from it on
every call.
"""

from urllib.parse import urlparse

from .config import UrlConfig
from .joiner import deduplicate_subdirectory, url_join


class SiteLocation:
    """Derives base URLs from one UrlConfig."""

    def __init__(self, config: UrlConfig) -> None:
        self._config = config

    def get_site_url(self, secure: bool | None = None) -> str:
        """Return the configured site URL, always with a trailing ``/``.

        A secure request forces https even when the site is configured with
        http, e.g. when a proxy terminates SSL in front of an http backend.
        """
        site_url = self._config.site_url

        if secure and site_url.startswith("http://"):
            site_url = "https://" + site_url[len("http://") :]

        if not site_url.endswith("/"):
            site_url += "/"

        return site_url

    def get_subdir(self) -> str:
        """Return the sub-directory (``/blog``) or ``""`` when served from root."""
        local_path = urlparse(self._config.site_url).path

        if local_path in ("", "/"):
            return ""

        # Remove trailing slash
        if local_path.endswith("/"):
            local_path = local_path[:-1]

        return "" if local_path == "/" else local_path

    def get_admin_url(self) -> str | None:
        """Return the admin base URL, or None when the admin is not hosted separately."""
        admin_url = self._config.admin_url
        if not admin_url:
            return None

        if not admin_url.endswith("/"):
            admin_url += "/"

        site_url = self.get_site_url()
        admin_url = url_join([admin_url, self.get_subdir(), "/"], site_url)
        return deduplicate_subdirectory(admin_url, site_url)

    def get_protected_slugs(self) -> list[str]:
        """Return reserved slugs plus the last sub-directory segment, if any."""
        slugs = list(self._config.protected_slugs)
        subdir = self.get_subdir()

        if subdir:
            slugs.append(subdir.split("/")[-1])

        return slugs
