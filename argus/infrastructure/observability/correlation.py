"""Correlation ID tracking across async boundaries.

Each HTTP request gets a correlation id (taken from the X-Correlation-ID
header or generated). Every workflow log line and every mutation log
carries it, so one user action can be followed from the route through
validation, persistence and notification dispatch.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Empty string when unset
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID, or empty string if none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to each entry.

    An id already bound on the logger wins over the context value.
    """
    correlation_id = get_correlation_id()
    if correlation_id and not event_dict.get("correlation_id"):
        event_dict["correlation_id"] = correlation_id
    return event_dict
