# src/site_urls/config.py
"""Configuration management for site-urls.

A ``UrlConfig`` is built once and never mutated. It can be created directly
or from an environment object with ``config_from_env``, which uses typed
getters with logged fallbacks to the defaults below.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .utils import log_op

# =============================================================================
# Constants
# =============================================================================

DEFAULT_SITE_URL = "http://localhost:2368/"

# Static prefix for serving the API, override only for custom API mounts
DEFAULT_BASE_API_PATH = "/ghost/api"

# Static prefix images are served under, regardless of storage location
DEFAULT_STATIC_IMAGE_URL_PREFIX = "content/images"

# Admin client mount point below the admin (or site) URL
ADMIN_PATH = "ghost/"

DEFAULT_API_VERSION = "v0.1"
DEFAULT_API_VERSION_TYPE = "content"

# Used for 301s when no cache age is configured
DEFAULT_REDIRECT_CACHE_MAX_AGE = 0

#: version name -> {version type -> path segment} or -> another version name
ApiVersionTable = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class UrlConfig:
    """URL settings for one site. Immutable."""

    site_url: str
    admin_url: str | None = None
    api_versions: ApiVersionTable | None = None
    protected_slugs: tuple[str, ...] = field(default_factory=tuple)
    redirect_cache_max_age: int | None = None
    base_api_path: str = DEFAULT_BASE_API_PATH
    static_image_url_prefix: str = DEFAULT_STATIC_IMAGE_URL_PREFIX

    def __post_init__(self) -> None:
        if not isinstance(self.protected_slugs, tuple):
            object.__setattr__(self, "protected_slugs", tuple(self.protected_slugs or ()))


# =============================================================================
# Configuration Getters
# =============================================================================


def get_config_value(
    env: Any,
    env_key: str,
    default: int | None,
    value_type: type[int] = int,
) -> int | None:
    """Get a configuration value from environment with type conversion.

    Args:
        env: Any object exposing settings as attributes
        env_key: The environment variable name
        default: Default value if not set or on error
        value_type: Type to convert to

    Returns:
        The configured value or default.
    """
    try:
        value = getattr(env, env_key, None)
        return value_type(value) if value else default
    except (ValueError, TypeError) as e:
        log_op(
            "config_validation_error",
            config_key=env_key,
            error=str(e),
        )
        return default


def get_str_config(env: Any, env_key: str, default: str | None = None) -> str | None:
    """Get a string setting, treating empty values as unset."""
    value = getattr(env, env_key, None)
    return str(value) if value else default


def get_api_versions(env: Any) -> ApiVersionTable | None:
    """Parse the API_VERSIONS JSON object, or None when absent or invalid."""
    raw = getattr(env, "API_VERSIONS", None)
    if not raw:
        return None
    if isinstance(raw, Mapping):
        return raw
    try:
        table = json.loads(raw)
    except (ValueError, TypeError) as e:
        log_op("config_validation_error", config_key="API_VERSIONS", error=str(e))
        return None
    if not isinstance(table, dict):
        log_op(
            "config_validation_error",
            config_key="API_VERSIONS",
            error=f"expected a JSON object, got {type(table).__name__}",
        )
        return None
    return table


def get_protected_slugs(env: Any) -> tuple[str, ...]:
    """Get reserved slugs from a comma separated PROTECTED_SLUGS value."""
    raw = getattr(env, "PROTECTED_SLUGS", None)
    if not raw:
        return ()
    if isinstance(raw, list | tuple):
        return tuple(str(slug) for slug in raw)
    return tuple(slug.strip() for slug in str(raw).split(",") if slug.strip())


def config_from_env(env: Any) -> UrlConfig:
    """Build a UrlConfig from an environment object.

    Reads SITE_URL, ADMIN_URL, API_VERSIONS, PROTECTED_SLUGS,
    REDIRECT_CACHE_MAX_AGE, BASE_API_PATH and STATIC_IMAGE_URL_PREFIX.
    """
    return UrlConfig(
        site_url=get_str_config(env, "SITE_URL", DEFAULT_SITE_URL),
        admin_url=get_str_config(env, "ADMIN_URL"),
        api_versions=get_api_versions(env),
        protected_slugs=get_protected_slugs(env),
        redirect_cache_max_age=get_config_value(env, "REDIRECT_CACHE_MAX_AGE", None),
        base_api_path=get_str_config(env, "BASE_API_PATH", DEFAULT_BASE_API_PATH),
        static_image_url_prefix=get_str_config(
            env, "STATIC_IMAGE_URL_PREFIX", DEFAULT_STATIC_IMAGE_URL_PREFIX
        ),
    )
