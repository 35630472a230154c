"""String assembly for the query builder.

Functions here turn accumulated builder state into the pieces of the final
query. All of them are pure, except ``attach_to_parent`` which hands the outer
table to a nested builder before it renders.

Placeholder dialect:
    {table}         table reference
    {table:column}  qualified column reference
"""

from typing import Iterable, List, Optional, Sequence

from smartquery.logging import get_logger
from smartquery.query_builder.terms import Term, is_function
from smartquery.query_builder.types import NestedWhere, OrderEntry, WhereCondition, WhereEntry

logger = get_logger(__name__)


def compose_column(table: str, column: str) -> str:
    return f"{{{table}:{column}}}"


def compose_columns(table: str, columns: Iterable[str]) -> str:
    return ",".join(compose_column(table, column) for column in columns)


def compose_table(table: str) -> str:
    return f"{{{table}}}"


def compose_condition(table: str, column: Term, operator: str, criteria: Term) -> str:
    """Compose one ``column OPERATOR criteria`` condition.

    A function column is emitted as its bare expression, a plain column as
    ``{table:column}``. Criteria are emitted verbatim (function criteria as
    their expression).
    """
    left = str(column) if is_function(column) else compose_column(table, str(column))
    return f"{left} {operator} {criteria}"


def attach_to_parent(nested: NestedWhere, table: str) -> None:
    """Give a nested builder the table of the builder that contains it.

    This overwrites the nested builder's table, also for later renders of the
    nested builder on its own.
    """
    attach = getattr(nested.builder, "attach_table", None)
    if callable(attach):
        logger.debug("Attaching nested builder to parent table", extra={"table": table})
        attach(table)


def compose_entry(table: str, entry: WhereEntry) -> str:
    if isinstance(entry, WhereCondition):
        return compose_condition(table, entry.column, entry.operator.value, entry.criteria)

    attach_to_parent(entry, table)
    return entry.builder.render()


def compose_where(table: str, entries: Sequence[WhereEntry]) -> str:
    """Compose `` WHERE ...``, or an empty string when there are no entries.

    Each entry after the first is prefixed with its joiner.
    """
    if not entries:
        return ""

    conditions: List[str] = []
    for index, entry in enumerate(entries):
        composed = compose_entry(table, entry)
        if index == 0:
            conditions.append(composed)
        else:
            conditions.append(f"{entry.joiner.value} {composed}")

    return f" WHERE {' '.join(conditions)}"


def strip_where_keyword(where: str) -> str:
    """Remove the leading ``WHERE`` keyword and surrounding whitespace."""
    stripped = where.lstrip()
    if stripped.startswith("WHERE"):
        stripped = stripped[len("WHERE"):]
    return stripped.lstrip()


def compose_group(table: str, entries: Sequence[WhereEntry]) -> str:
    """Compose the WHERE content alone, wrapped in parentheses."""
    return f"({strip_where_keyword(compose_where(table, entries))})"


def compose_order_by(table: str, entries: Sequence[OrderEntry]) -> str:
    if not entries:
        return ""
    order_bys = [f"{compose_column(table, entry.column)} {entry.direction.value}" for entry in entries]
    return f" ORDER BY {','.join(order_bys)}"


def compose_group_by(table: str, columns: Sequence[str]) -> str:
    if not columns:
        return ""
    return f" GROUP BY {compose_columns(table, columns)}"


def compose_limit(limit: Optional[int]) -> str:
    if limit is None:
        return ""
    return f" LIMIT {limit}"


def compose_select(
    table: str,
    columns: Sequence[str],
    where: Sequence[WhereEntry],
    order_by: Sequence[OrderEntry],
    group_by: Sequence[str],
    limit: Optional[int],
) -> str:
    """Compose the full statement, or the grouped WHERE content when no columns are selected."""
    if not columns:
        return compose_group(table, where)

    return (
        f"SELECT {compose_columns(table, columns)} FROM {compose_table(table)}"
        f"{compose_where(table, where)}"
        f"{compose_order_by(table, order_by)}"
        f"{compose_group_by(table, group_by)}"
        f"{compose_limit(limit)}"
    )
