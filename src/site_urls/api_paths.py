# src/site_urls/api_paths.py
"""API path lookup through the configured version table.

The table maps a version name to either a mapping of version types to path
segments, or to another version name (an alias):

    {
        "v2": {"admin": "v2/admin", "content": "v2/content"},
        "v0.1": {"admin": "v0.1", "content": "v0.1"},
        "canary": "v2",
    }
"""

from collections.abc import Mapping

from .config import DEFAULT_API_VERSION, DEFAULT_API_VERSION_TYPE, UrlConfig


class ApiVersionError(LookupError):
    """The API version table is missing, incomplete or has an alias cycle."""


class ApiPathResolver:
    """Maps (version, type) pairs to API paths for one UrlConfig."""

    def __init__(self, config: UrlConfig) -> None:
        self._config = config

    def _version_entry(self, version: str) -> Mapping[str, str]:
        table = self._config.api_versions
        if table is None:
            raise ApiVersionError("No API versions configured")

        seen: list[str] = []
        entry = table.get(version)
        while isinstance(entry, str):
            seen.append(version)
            if entry in seen:
                chain = " -> ".join([*seen, entry])
                raise ApiVersionError(f"Cyclic API version alias: {chain}")
            version = entry
            entry = table.get(version)

        if not isinstance(entry, Mapping):
            raise ApiVersionError(f"Unknown API version: {version}")
        return entry

    def get_version_path(
        self, version: str | None = None, version_type: str | None = None
    ) -> str:
        """Return the version segment wrapped in slashes, e.g. ``/v2/content/``."""
        version = version or DEFAULT_API_VERSION
        version_type = version_type or DEFAULT_API_VERSION_TYPE

        entry = self._version_entry(version)
        try:
            version_path = entry[version_type]
        except KeyError:
            raise ApiVersionError(
                f"API version {version} has no {version_type!r} path"
            ) from None
        return f"/{version_path}/"

    def get_api_path(self, version: str | None = None, version_type: str | None = None) -> str:
        """Return the full API path, e.g. ``/ghost/api/v2/content/``."""
        return f"{self._config.base_api_path}{self.get_version_path(version, version_type)}"
