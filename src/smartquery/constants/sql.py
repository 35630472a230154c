"""SQL vocabulary constants.

This module contains the enums and whitelists that describe which operators,
directions and boolean joiners the query builder accepts. They are part of the
public surface so callers can inspect the accepted vocabulary and pattern-match
on failures.
"""

from enum import Enum
from typing import Tuple


class Operator(str, Enum):
    """Comparison operators accepted in WHERE conditions."""

    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    EQ = "="
    EQ_EQ = "=="
    NEQ = "!="
    NEQ_ANSI = "<>"
    IN = "IN"
    NOT_IN = "NOT IN"
    IS = "IS"


class Direction(str, Enum):
    """ORDER BY directions."""

    ASC = "ASC"
    DESC = "DESC"


class Joiner(str, Enum):
    """Boolean operator attaching a WHERE entry to the previous one.

    The joiner of the first entry of a WHERE clause is never rendered.
    """

    AND = "AND"
    OR = "OR"


class FunctionKind(str, Enum):
    """SQLite date functions that can wrap a column or literal."""

    DATE = "date"
    DATETIME = "datetime"


WHITELISTED_OPERATORS: Tuple[str, ...] = tuple(op.value for op in Operator)
WHITELISTED_DIRECTIONS: Tuple[str, ...] = tuple(d.value for d in Direction)
