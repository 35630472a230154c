import logging
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Reason codes for SmartQuery failures.

    This enum provides categorized error codes that can be used to identify
    the failed rule without creating numerous exception classes. Callers
    pattern-match on these members; the string values are stable.

    Attributes:
        IDENTIFIER: Table (or date helper table) failed the identifier pattern
        EXPRESSION: Column or criteria fragment failed the expression pattern
        OPERATOR_NOT_WHITELISTED: Operator is not in ``WHITELISTED_OPERATORS``
        DIRECTION_NOT_WHITELISTED: Direction is not ASC or DESC
        DIGITS_EXPECTED: LIMIT value is not made of digits only
        EXPECTS_BUILDER: Grouped where received a value that cannot render
    """
    IDENTIFIER = "VALIDATION_001"
    EXPRESSION = "VALIDATION_002"
    OPERATOR_NOT_WHITELISTED = "VALIDATION_003"
    DIRECTION_NOT_WHITELISTED = "VALIDATION_004"
    DIGITS_EXPECTED = "VALIDATION_005"
    EXPECTS_BUILDER = "VALIDATION_006"


# Default messages. Used as the exception message for each reason code.
EXCEPTION_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.IDENTIFIER: "SmartQuery: Only characters, digits and underscores are accepted",
    ErrorCode.EXPRESSION: "SmartQuery: Only characters, digits, underscores, and dashes are accepted",
    ErrorCode.OPERATOR_NOT_WHITELISTED: "SmartQuery: Operator not recognized or not whitelisted",
    ErrorCode.DIRECTION_NOT_WHITELISTED: "SmartQuery: Unknown direction",
    ErrorCode.DIGITS_EXPECTED: "SmartQuery: Only digits expected",
    ErrorCode.EXPECTS_BUILDER: "SmartQuery: where method expects a query builder as parameter",
}


class SmartQueryError(Exception):
    """Base exception for all SmartQuery errors.

    This exception class uses error codes for categorization instead of
    creating a class per failed rule.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize SmartQuery error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy imports to avoid circular dependency
        from smartquery.logging import get_logger
        from smartquery.settings import get_settings

        if get_settings().log_rejections:
            get_logger(__name__).log(
                self.log_level,
                message,
                extra={
                    "error_code": error_code.value,
                    "error_name": error_code.name,
                    "details": self.details,
                },
                exc_info=cause is not None,
            )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


class ValidationError(SmartQueryError, ValueError):
    """A query fragment was rejected by a whitelist check."""

    log_level = logging.WARNING

    @property
    def reason(self) -> ErrorCode:
        return self.error_code


def validation_error(
    error_code: ErrorCode,
    value: Any = None,
    fragment: Optional[str] = None,
) -> ValidationError:
    """Create a validation error with the fixed message for ``error_code``.

    Args:
        error_code: Reason code of the violated rule
        value: The rejected input, recorded in details
        fragment: Kind of fragment being validated (table, column, ...)

    Returns:
        ValidationError carrying the standard message
    """
    details: Dict[str, Any] = {}
    if value is not None:
        details["value"] = repr(value)
    if fragment:
        details["fragment"] = fragment

    return ValidationError(
        message=EXCEPTION_MESSAGES[error_code],
        error_code=error_code,
        details=details,
    )
