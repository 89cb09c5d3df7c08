# src/site_urls/utils.py
"""Utility functions for site-urls.

Standalone helpers for structured logging, error formatting and datetime
parsing. These have no dependencies on the resolver classes.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

# =============================================================================
# Type Aliases
# =============================================================================

#: Logging kwargs - intentionally accepts any JSON-serializable values
LogKwargs = Any

# =============================================================================
# Constants
# =============================================================================

# Standardized error message truncation length
ERROR_MESSAGE_MAX_LENGTH = 200

# =============================================================================
# Structured Logging
# =============================================================================

_logger = logging.getLogger("site_urls")
if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(_handler)
    _logger.setLevel(logging.INFO)
    # Note: propagate defaults to True, needed for test caplog capture


def get_iso_timestamp() -> str:
    """Get current UTC time as ISO string with Z suffix (RFC3339)."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def log_op(event_type: str, **kwargs: LogKwargs) -> None:
    """Log an operational event as structured JSON.

    Unlike wide events (RedirectEvent), these are simpler operational
    logs for debugging odd inputs and configuration problems.
    """
    event = {
        "event_type": event_type,
        "timestamp": get_iso_timestamp(),
        **kwargs,
    }
    _logger.info(json.dumps(event))


def truncate_error(error: str | Exception, max_length: int = ERROR_MESSAGE_MAX_LENGTH) -> str:
    """Truncate error message with indicator if needed."""
    error_str = str(error)
    if len(error_str) <= max_length:
        return error_str
    return error_str[: max_length - 3] + "..."


def log_error(event_type: str, exception: Exception, **kwargs: LogKwargs) -> None:
    """Log an error event with standardized exception formatting.

    Uses logger.error() level for error events, making them easily
    distinguishable from info-level operational logs.
    """
    event = {
        "event_type": event_type,
        "timestamp": get_iso_timestamp(),
        "error_type": type(exception).__name__,
        "error": truncate_error(exception),
        **kwargs,
    }
    _logger.error(json.dumps(event))


# =============================================================================
# Datetime Helpers
# =============================================================================


def parse_iso_datetime(iso_string: str | None) -> datetime | None:
    """Parse an ISO datetime string to a timezone-aware datetime.

    Handles various ISO formats:
    - With Z suffix: "2026-01-17T12:00:00Z"
    - With offset: "2026-01-17T12:00:00+00:00"
    - Naive (no timezone): "2026-01-17T12:00:00" (assumes UTC)
    """
    if not iso_string:
        return None
    try:
        dt = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt
    except (ValueError, AttributeError):
        return None
