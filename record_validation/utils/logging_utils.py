"""Structured logging utilities with per-request context support."""

import logging
import threading
import uuid
from typing import Any, Dict, Optional, cast

# Thread-local storage for log context
_thread_local = threading.local()

# Personal data that must never reach the logs verbatim. Matched against
# lower-cased keys with underscores removed, so both ``date_of_birth`` and
# ``dateOfBirth`` are caught.
SENSITIVE_FIELDS = {
    "email",
    "phone",
    "dateofbirth",
    "salary",
    "password",
    "token",
    "secret",
    "authorization",
}

REDACTED = "***REDACTED***"


def generate_correlation_id() -> str:
    """
    Generate a unique correlation ID for tracking requests.

    Returns:
        UUID string to use as correlation ID
    """
    return str(uuid.uuid4())


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are kept in thread-local storage and copied onto every record
    emitted inside the ``with`` block by the filter installed in
    ``configure_logging``.

    Example:
        with LogContext(correlation_id=generate_correlation_id(), record_type="staff"):
            logger.info("Validating record")
    """

    def __init__(self, **kwargs):
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.previous_context is not None:
            _thread_local.context = self.previous_context
        else:
            _thread_local.context = {}


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(_thread_local, "context"):
            for key, value in _thread_local.context.items():
                setattr(record, key, value)
        return True


def _is_sensitive(key: str) -> bool:
    normalized = key.lower().replace("_", "")
    return any(sensitive in normalized for sensitive in SENSITIVE_FIELDS)


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact personal and secret fields in a dictionary.

    Nested dictionaries are processed recursively. Missing values stay
    ``None`` so the log still shows which fields were absent.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized copy with sensitive values redacted
    """
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}

    for key, value in data.items():
        if _is_sensitive(str(key)):
            sanitized[key] = REDACTED if value is not None else None
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(cast(Dict[str, Any], value))
        else:
            sanitized[key] = value

    return sanitized
