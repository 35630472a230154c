"""Whitelist predicates for query fragments.

Every predicate is pure and never raises; the builder decides which error
code a failed predicate maps to.
"""

from typing import Any, Optional

from smartquery.constants import WHITELISTED_DIRECTIONS, WHITELISTED_OPERATORS
from smartquery.constants import patterns
from smartquery.query_builder.terms import FunctionTerm, PlainTerm


def is_identifier(value: Any) -> bool:
    """Word characters only, optionally single-quoted. Used for tables and selected columns."""
    return isinstance(value, str) and patterns.IDENTIFIER.fullmatch(value) is not None


def _token_text(value: Any) -> Optional[str]:
    if isinstance(value, PlainTerm):
        value = value.value
    # bool is an int subclass, but True/False are not query tokens
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return str(value)


def is_expression_token(value: Any) -> bool:
    """Comma-joinable, optionally parenthesized word/dash/dot tokens.

    Only strings, numbers and plain terms qualify; ``None`` and function
    terms never do.
    """
    text = _token_text(value)
    return text is not None and patterns.EXPRESSION.fullmatch(text) is not None


def is_function_expression(expression: str) -> bool:
    """True if ``expression`` has the shape of a date or datetime call."""
    return (
        patterns.FUNCTION_DATE.fullmatch(expression) is not None
        or patterns.FUNCTION_DATETIME.match(expression) is not None
    )


def is_expression(value: Any) -> bool:
    """Check a WHERE column or criteria.

    Function terms are checked against the function shapes, everything else
    (plain terms, strings, numbers) against the expression token pattern.
    """
    if isinstance(value, FunctionTerm):
        return is_function_expression(value.expression)
    return is_expression_token(value)


def is_datetime_literal(value: Any) -> bool:
    text = _token_text(value)
    return text is not None and patterns.DATETIME_LITERAL.fullmatch(text) is not None


def is_operator(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in WHITELISTED_OPERATORS


def is_direction(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in WHITELISTED_DIRECTIONS


def is_digits(value: Any) -> bool:
    return patterns.DIGITS.fullmatch(str(value)) is not None
