"""Structured logging utilities with per-run context support."""

import logging
import threading
import uuid
from typing import Any, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def generate_correlation_id() -> str:
    """Generate a unique id used to tie together all records of one report run."""
    return uuid.uuid4().hex[:12]


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current thread."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are stored in thread-local storage and copied onto every record by
    ``_ContextFilter``. Worker threads start with an empty context, so code
    that hands work to a pool should capture ``get_log_context()`` and re-enter
    it inside the task.

    Example:
        with LogContext(workspace_id="ws-1", report_month="2024-10"):
            logger.info("Fetching users")
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
        _thread_local.context = self.previous_context or {}


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in getattr(_thread_local, "context", {}).items():
            setattr(record, key, value)
        return True
