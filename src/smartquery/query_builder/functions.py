"""SQLite ``date`` and ``datetime`` helpers.

Both helpers have two call shapes:

    date("orders", "created_at")   -> date({orders:created_at})
    date("2020-01-31")             -> date(substr('2020-01-31',1,10))

    date_time("orders", "created_at") -> datetime(substr({orders:created_at},0,24))
    date_time("2020-01-31T10:00:00.000") -> datetime(substr('2020-01-31T10:00:00.000',0,24))

The result is a function term meant to be passed as the column or criteria of
``QueryBuilder.where``/``or_where``:

    >>> q = QueryBuilder().select(["id"]).from_("orders")
    >>> q.where(date("orders", "created_at"), ">=", date("2020-01-31"))

Note that the field of the two argument form accepts dashes and dots, while a
WHERE condition only accepts ``date({table:field})`` for plain word fields.
"""

from typing import Optional

from smartquery.common.exceptions import ErrorCode, validation_error
from smartquery.query_builder import validator
from smartquery.query_builder.terms import DateFunction, DateTimeFunction


def _validate_field(table: str, field: str) -> None:
    if not validator.is_identifier(table):
        raise validation_error(ErrorCode.IDENTIFIER, table, fragment="table")
    if not validator.is_expression_token(field):
        raise validation_error(ErrorCode.EXPRESSION, field, fragment="date field")


def _validate_literal(literal: str) -> None:
    if not validator.is_expression_token(literal) and not validator.is_datetime_literal(literal):
        raise validation_error(ErrorCode.EXPRESSION, literal, fragment="date literal")


def date(table_or_literal: str, field: Optional[str] = None) -> DateFunction:
    """Wrap a column or a ``YYYY-MM-DD...`` literal in SQLite's ``date``.

    Args:
        table_or_literal: Table name when ``field`` is given, otherwise the
            date literal.
        field: Column name of the two argument form.

    Raises:
        ValidationError: IDENTIFIER for a bad table, EXPRESSION for a bad
            field or literal.
    """
    if field is not None:
        _validate_field(table_or_literal, field)
        return DateFunction(expression=f"date({{{table_or_literal}:{field}}})")

    _validate_literal(table_or_literal)
    return DateFunction(expression=f"date(substr('{table_or_literal}',1,10))")


def date_time(table_or_literal: str, field: Optional[str] = None) -> DateTimeFunction:
    """Wrap a column or a ``YYYY-MM-DDTHH:MM:SS.sss`` literal in SQLite's ``datetime``.

    Same call shapes and errors as ``date``.
    """
    if field is not None:
        _validate_field(table_or_literal, field)
        return DateTimeFunction(expression=f"datetime(substr({{{table_or_literal}:{field}}},0,24))")

    _validate_literal(table_or_literal)
    return DateTimeFunction(expression=f"datetime(substr('{table_or_literal}',0,24))")
