"""Entry types accumulated by the query builder.

A WHERE clause is an ordered list of entries, each either a flat
``WhereCondition`` or a ``NestedWhere`` wrapping another builder. Every entry
records the ``Joiner`` attaching it to the previous entry.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict

from smartquery.constants import Direction, Joiner, Operator


class SmartQueryModel(BaseModel):
    """Base model for the builder's immutable value types."""
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
    )


class WhereCondition(SmartQueryModel):
    """A single ``column OPERATOR criteria`` condition.

    ``column`` and ``criteria`` hold terms from
    ``smartquery.query_builder.terms``, which builds on this module.
    """
    column: Any
    operator: Operator
    criteria: Any
    joiner: Joiner = Joiner.AND


class NestedWhere(SmartQueryModel):
    """A grouped condition rendered from another builder."""
    builder: Any
    joiner: Joiner = Joiner.AND


class OrderEntry(SmartQueryModel):
    column: str
    direction: Direction = Direction.ASC


WhereEntry = Union[WhereCondition, NestedWhere]
