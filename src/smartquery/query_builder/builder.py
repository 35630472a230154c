"""Fluent builder for placeholder-based SQL-like queries.

The builder never executes anything; it validates every fragment against a
whitelist and renders a string in the ``{table}`` / ``{table:column}``
placeholder dialect, to be resolved by a downstream templating layer.

Usage:
    >>> q = QueryBuilder()
    >>> q.select(["id", "name"]).from_("table")
    >>> q.where("field1", "=", "criteria1").where("field2", "=", "criteria2")
    >>> q.render()
    'SELECT {table:id},{table:name} FROM {table} WHERE {table:field1} = criteria1 AND {table:field2} = criteria2'

    Grouped conditions are built with a second builder:

    >>> q = QueryBuilder().select(["id"]).from_("table").where("id", "=", 1)
    >>> q.where(QueryBuilder().where("first", "=", "'f'").or_where("last", "=", "'l'"))
    >>> q.render()
    "SELECT {table:id} FROM {table} WHERE {table:id} = 1 AND ({table:first} = 'f' OR {table:last} = 'l')"

Builders are not safe for concurrent mutation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from smartquery.common.exceptions import ErrorCode, validation_error
from smartquery.constants import Direction, Joiner, Operator
from smartquery.logging import get_logger
from smartquery.protocols import Renderable, is_renderable
from smartquery.query_builder import composer, functions, validator
from smartquery.query_builder.terms import DateFunction, DateTimeFunction, to_term
from smartquery.query_builder.types import NestedWhere, OrderEntry, WhereCondition, WhereEntry
from smartquery.settings import get_settings
from smartquery.utils.decorators import traced

logger = get_logger(__name__)


def _render_attributes(builder: QueryBuilder) -> Dict[str, Any]:
    return {
        "smartquery.table": builder.table,
        "smartquery.columns": len(builder.columns),
        "smartquery.where_entries": len(builder.where_entries),
    }


def _trace_render_enabled() -> bool:
    return get_settings().trace_render


class QueryBuilder:
    """Accumulates validated clause state and renders it on demand.

    Every clause method validates its input before touching state and
    returns the builder itself, so calls can be chained. ``select``,
    ``from_`` and ``limit`` overwrite; every other clause method appends.
    """

    def __init__(self) -> None:
        self._table: str = ""
        self._columns: List[str] = []
        self._where: List[WhereEntry] = []
        self._order_by: List[OrderEntry] = []
        self._group_by: List[str] = []
        self._limit: Optional[int] = None

    @classmethod
    def new_instance(cls) -> QueryBuilder:
        return cls()

    # --- Introspection ---

    @property
    def table(self) -> str:
        return self._table

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    @property
    def where_entries(self) -> Tuple[WhereEntry, ...]:
        return tuple(self._where)

    @property
    def order_entries(self) -> Tuple[OrderEntry, ...]:
        return tuple(self._order_by)

    @property
    def group_columns(self) -> Tuple[str, ...]:
        return tuple(self._group_by)

    @property
    def limit_value(self) -> Optional[int]:
        return self._limit

    # --- SELECT / FROM ---

    def select(self, columns: Union[str, Sequence[str]]) -> QueryBuilder:
        """Set the selected columns.

        Entries that are not plain identifiers are dropped, not rejected.
        A single string is taken as one column name.
        """
        if isinstance(columns, str):
            columns = [columns]
        sanitized = []
        for column in columns or []:
            if validator.is_identifier(column):
                sanitized.append(column)
            else:
                logger.debug("Dropped column failing identifier check", extra={"column": repr(column)})
        self._columns = sanitized
        return self

    def from_(self, table: str) -> QueryBuilder:
        """Set the table.

        Raises:
            ValidationError: IDENTIFIER if ``table`` is not a plain identifier
        """
        if not validator.is_identifier(table):
            raise validation_error(ErrorCode.IDENTIFIER, table, fragment="table")
        self._table = table
        return self

    def attach_table(self, table: str) -> None:
        """Set the table of a nested builder to the one of its parent.

        Called while a parent renders; the parent's table was validated by
        the parent's own ``from_``.
        """
        self._table = table

    # --- WHERE ---

    def where(self, column: Any, operator: Optional[str] = None, criteria: Any = None) -> QueryBuilder:
        """Add a condition or a grouped condition, joined with AND.

        ``where(column, operator, criteria)`` adds ``{table:column} OPERATOR criteria``.
        ``where(builder)`` adds the builder's conditions in parentheses.
        """
        return self._add_where(Joiner.AND, column, operator, criteria)

    def or_where(self, column: Any, operator: Optional[str] = None, criteria: Any = None) -> QueryBuilder:
        """Same call shapes as ``where``, joined with OR."""
        return self._add_where(Joiner.OR, column, operator, criteria)

    def where_condition(self, column: Any, operator: str, criteria: Any) -> QueryBuilder:
        return self._add_condition(Joiner.AND, column, operator, criteria)

    def or_where_condition(self, column: Any, operator: str, criteria: Any) -> QueryBuilder:
        return self._add_condition(Joiner.OR, column, operator, criteria)

    def where_group(self, builder: Renderable) -> QueryBuilder:
        return self._add_group(Joiner.AND, builder)

    def or_where_group(self, builder: Renderable) -> QueryBuilder:
        return self._add_group(Joiner.OR, builder)

    def where_in(self, left: Any, right: Any) -> QueryBuilder:
        """Add ``left IN right``. ``right`` is taken as is, e.g. ``"(1,2,3)"``."""
        return self._add_fixed(Joiner.AND, left, Operator.IN, right, validate_right=False)

    def or_where_in(self, left: Any, right: Any) -> QueryBuilder:
        return self._add_fixed(Joiner.OR, left, Operator.IN, right, validate_right=False)

    def where_is(self, left: Any, right: Any) -> QueryBuilder:
        """Add ``left IS right``, e.g. ``where_is("deleted_at", "NULL")``."""
        return self._add_fixed(Joiner.AND, left, Operator.IS, right, validate_right=True)

    def or_where_is(self, left: Any, right: Any) -> QueryBuilder:
        return self._add_fixed(Joiner.OR, left, Operator.IS, right, validate_right=True)

    def _add_where(self, joiner: Joiner, column: Any, operator: Optional[str], criteria: Any) -> QueryBuilder:
        if operator is None and criteria is None:
            return self._add_group(joiner, column)
        if operator is None or criteria is None:
            raise validation_error(ErrorCode.EXPECTS_BUILDER, column, fragment="where")
        return self._add_condition(joiner, column, operator, criteria)

    def _add_condition(self, joiner: Joiner, column: Any, operator: str, criteria: Any) -> QueryBuilder:
        if not validator.is_expression(column):
            raise validation_error(ErrorCode.EXPRESSION, column, fragment="column")
        if not validator.is_operator(operator):
            raise validation_error(ErrorCode.OPERATOR_NOT_WHITELISTED, operator, fragment="operator")
        if not validator.is_expression(criteria):
            raise validation_error(ErrorCode.EXPRESSION, criteria, fragment="criteria")

        self._where.append(
            WhereCondition(
                column=to_term(column),
                operator=Operator(operator.upper()),
                criteria=to_term(criteria),
                joiner=joiner,
            )
        )
        return self

    def _add_fixed(self, joiner: Joiner, left: Any, operator: Operator, right: Any, validate_right: bool) -> QueryBuilder:
        if not validator.is_expression(left):
            raise validation_error(ErrorCode.EXPRESSION, left, fragment="column")
        if validate_right and not validator.is_expression(right):
            raise validation_error(ErrorCode.EXPRESSION, right, fragment="criteria")

        self._where.append(
            WhereCondition(column=to_term(left), operator=operator, criteria=to_term(right), joiner=joiner)
        )
        return self

    def _add_group(self, joiner: Joiner, builder: Any) -> QueryBuilder:
        if not is_renderable(builder):
            raise validation_error(ErrorCode.EXPECTS_BUILDER, builder, fragment="where")
        self._where.append(NestedWhere(builder=builder, joiner=joiner))
        return self

    # --- ORDER BY / GROUP BY / LIMIT ---

    def order_by(self, column: str, direction: Optional[str] = None) -> QueryBuilder:
        """Append an ORDER BY column, ascending unless ``direction`` says otherwise.

        Only plain columns are accepted; a ``date``/``date_time`` term raises
        EXPRESSION.
        """
        if not validator.is_expression_token(column):
            raise validation_error(ErrorCode.EXPRESSION, column, fragment="order by")
        if direction is not None and not validator.is_direction(direction):
            raise validation_error(ErrorCode.DIRECTION_NOT_WHITELISTED, direction, fragment="direction")

        resolved = Direction.ASC if direction is None else Direction(direction.upper())
        self._order_by.append(OrderEntry(column=str(column), direction=resolved))
        return self

    def group_by(self, column: str) -> QueryBuilder:
        """Append a GROUP BY column. Duplicates are kept. Function terms raise EXPRESSION."""
        if not validator.is_expression_token(column):
            raise validation_error(ErrorCode.EXPRESSION, column, fragment="group by")
        self._group_by.append(str(column))
        return self

    def limit(self, count: Any) -> QueryBuilder:
        """Set the LIMIT.

        Raises:
            ValidationError: DIGITS_EXPECTED unless ``str(count)`` is all digits
        """
        if not validator.is_digits(count):
            raise validation_error(ErrorCode.DIGITS_EXPECTED, count, fragment="limit")
        self._limit = int(str(count))
        return self

    # --- Date helpers ---

    def date(self, table_or_literal: str, field: Optional[str] = None) -> DateFunction:
        """See ``smartquery.query_builder.functions.date``."""
        return functions.date(table_or_literal, field)

    def date_time(self, table_or_literal: str, field: Optional[str] = None) -> DateTimeFunction:
        """See ``smartquery.query_builder.functions.date_time``."""
        return functions.date_time(table_or_literal, field)

    # --- Render ---

    @traced("smartquery.render", attribute_getter=_render_attributes, enabled=_trace_render_enabled)
    def render(self) -> str:
        """Render the accumulated state.

        With selected columns this is the full ``SELECT ... FROM {table} ...``
        statement. Without columns only the WHERE conditions are rendered,
        in parentheses, which is how nested builders appear in their parent.

        Nested builders get this builder's table attached before they render.
        """
        query = composer.compose_select(
            self._table,
            self._columns,
            self._where,
            self._order_by,
            self._group_by,
            self._limit,
        )
        logger.debug("Rendered query", extra={"table": self._table, "query": query})
        return query

    run = render

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(table={self._table!r}, columns={self._columns!r}, "
            f"where={len(self._where)}, order_by={len(self._order_by)}, "
            f"group_by={self._group_by!r}, limit={self._limit!r})"
        )
