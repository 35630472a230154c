"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of the logs emitted while one query is being built.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

from smartquery.__version__ import __version__

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
query_name_var: ContextVar[Optional[str]] = ContextVar("query_name", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    Static context (environment plus arbitrary extras) is set once with
    ``set_logging_context``; query context is set per call chain with
    ``set_query_context``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        for key, value in _static_context.items():
            setattr(record, key, value)

        setattr(record, "correlation_id", correlation_id_var.get())
        setattr(record, "query_name", query_name_var.get())
        setattr(record, "sdk_name", "smartquery")
        setattr(record, "sdk_version", __version__)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context attached to every record."""
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


def set_query_context(
    correlation_id: Optional[str] = None,
    query_name: Optional[str] = None,
) -> None:
    """Set query context variables."""
    if correlation_id is not None:
        correlation_id_var.set(correlation_id)
    if query_name is not None:
        query_name_var.set(query_name)


def clear_query_context() -> None:
    """Clear all query context variables."""
    correlation_id_var.set(None)
    query_name_var.set(None)
