# src/site_urls/observability.py
"""
Wide event logging for redirects.

One comprehensive event per issued redirect, emitted as a single JSON line,
so redirect behavior can be audited without correlating several log lines.

Usage:
    event = RedirectEvent(status_code=301, location="/ghost/")
    emit_event(event)
"""

import json
import secrets
from dataclasses import asdict, dataclass, field
from typing import Any
from urllib.parse import urlparse

from .utils import _logger, get_iso_timestamp


def generate_request_id() -> str:
    """Generate a unique request ID for tracing."""
    return secrets.token_hex(8)


@dataclass
class RedirectEvent:
    """
    Canonical log line for an issued redirect.

    Emitted once per redirect by RedirectEmitter.
    """

    event_type: str = field(default="redirect", init=False)
    request_id: str = ""
    timestamp: str = ""

    # Redirect details
    status_code: int = 302
    location: str = ""
    location_host: str = ""
    target: str = "path"  # "path" | "admin"

    # Caching
    cache_control: str | None = None

    def __post_init__(self) -> None:
        """Set derived fields after initialization."""
        if not self.timestamp:
            self.timestamp = get_iso_timestamp()
        if not self.request_id:
            self.request_id = generate_request_id()
        if self.location and not self.location_host:
            try:
                self.location_host = urlparse(self.location).netloc
            except ValueError:
                self.location_host = ""


def emit_event(event: RedirectEvent | dict[str, Any]) -> None:
    """Emit an event as one JSON line on the package logger."""
    event_dict = event if isinstance(event, dict) else asdict(event)
    _logger.info(json.dumps(event_dict))
