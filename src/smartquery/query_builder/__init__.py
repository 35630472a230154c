"""Query builder module for placeholder-based query generation.

This module provides the fluent ``QueryBuilder`` and its collaborators.
Builders only generate strings; resolving the ``{table}`` and
``{table:column}`` placeholders into real SQL and executing it is left to
the caller.

Architecture:
    - builder.py: ``QueryBuilder``, the fluent state machine
    - validator.py: Whitelist predicates per fragment kind
    - composer.py: Pure functions assembling the output string
    - terms.py: Plain and date/datetime function terms
    - functions.py: ``date`` / ``date_time`` helpers producing function terms
    - types.py: Where and order entries

Example:
    >>> from smartquery.query_builder import QueryBuilder, date
    >>> q = QueryBuilder().select(["id"]).from_("orders")
    >>> q.where(date("orders", "created_at"), ">=", date("2020-01-31")).limit(10)
    >>> q.render()
    "SELECT {orders:id} FROM {orders} WHERE date({orders:created_at}) >= date(substr('2020-01-31',1,10)) LIMIT 10"

Security:
    Every fragment goes through a whitelist regular expression before it is
    stored. Rejected fragments raise ``ValidationError`` with an ``ErrorCode``;
    selected columns are the exception and are silently dropped instead.
"""

from smartquery.query_builder.builder import QueryBuilder
from smartquery.query_builder.functions import date, date_time
from smartquery.query_builder.terms import (
    DateFunction,
    DateTimeFunction,
    FunctionTerm,
    PlainTerm,
    Term,
)
from smartquery.query_builder.types import NestedWhere, OrderEntry, WhereCondition, WhereEntry

__all__ = [
    "QueryBuilder",
    "date",
    "date_time",
    "DateFunction",
    "DateTimeFunction",
    "FunctionTerm",
    "PlainTerm",
    "Term",
    "NestedWhere",
    "OrderEntry",
    "WhereCondition",
    "WhereEntry",
]
