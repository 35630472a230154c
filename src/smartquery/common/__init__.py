"""Common exceptions for SmartQuery.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    SmartQueryError and include structured error information.
"""

from smartquery.common.exceptions import (
    EXCEPTION_MESSAGES,
    ErrorCode,
    SmartQueryError,
    ValidationError,
    validation_error,
)

__all__ = [
    "EXCEPTION_MESSAGES",
    "ErrorCode",
    "SmartQueryError",
    "ValidationError",
    "validation_error",
]
