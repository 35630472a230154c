from smartquery.__version__ import __version__

from smartquery.query_builder import (
    QueryBuilder,
    date,
    date_time,
    DateFunction,
    DateTimeFunction,
    FunctionTerm,
    PlainTerm,
)

from smartquery.constants import (
    Direction,
    Joiner,
    Operator,
    WHITELISTED_DIRECTIONS,
    WHITELISTED_OPERATORS,
)

from smartquery.common.exceptions import (
    EXCEPTION_MESSAGES,
    ErrorCode,
    SmartQueryError,
    ValidationError,
)


__all__ = [
    "__version__",

    "QueryBuilder",
    "date",
    "date_time",
    "DateFunction",
    "DateTimeFunction",
    "FunctionTerm",
    "PlainTerm",

    # Vocabulary (public API)
    "Direction",
    "Joiner",
    "Operator",
    "WHITELISTED_DIRECTIONS",
    "WHITELISTED_OPERATORS",

    # Exceptions (public API)
    "EXCEPTION_MESSAGES",
    "ErrorCode",
    "SmartQueryError",
    "ValidationError",
]
