"""Logging infrastructure for SmartQuery.

This module provides structured logging with JSON output, context tracking
and OpenTelemetry trace correlation.
"""

from smartquery.logging.filters import (
    ContextFilter,
    clear_query_context,
    set_logging_context,
    set_query_context,
)
from smartquery.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "set_query_context",
    "clear_query_context",
]
