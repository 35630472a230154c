"""Terms used as the column or criteria of a WHERE condition.

A term is either a plain fragment, rendered qualified (``{table:column}``) on
the column side and verbatim on the criteria side, or a function term wrapping
a column or literal in SQLite's ``date``/``datetime``. Function terms are
always rendered as their bare expression.
"""

from typing import Any, Literal, Union

from smartquery.constants import FunctionKind
from smartquery.query_builder.types import SmartQueryModel


class PlainTerm(SmartQueryModel):
    value: str

    def __str__(self) -> str:
        return self.value


class FunctionTerm(SmartQueryModel):
    """Base class of the function-wrapped terms."""
    kind: FunctionKind
    expression: str

    def __str__(self) -> str:
        return self.expression


class DateFunction(FunctionTerm):
    """``date(...)`` expression produced by ``date()``."""
    kind: Literal[FunctionKind.DATE] = FunctionKind.DATE


class DateTimeFunction(FunctionTerm):
    """``datetime(substr(...))`` expression produced by ``date_time()``."""
    kind: Literal[FunctionKind.DATETIME] = FunctionKind.DATETIME


Term = Union[PlainTerm, DateFunction, DateTimeFunction]


def to_term(value: Any) -> Term:
    """Coerce a caller supplied value to a term.

    Terms pass through unchanged; anything else (strings, numbers) becomes a
    ``PlainTerm`` of its string form.
    """
    if isinstance(value, (PlainTerm, FunctionTerm)):
        return value
    return PlainTerm(value=str(value))


def is_function(term: Term) -> bool:
    return isinstance(term, FunctionTerm)
