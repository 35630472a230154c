"""Protocol definitions for SmartQuery.

Protocols provide type-safe interfaces without requiring inheritance,
following Python's structural subtyping (duck typing with type hints).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be nested as a grouped WHERE condition.

    The only requirement is a ``render()`` method returning the fragment.
    Implementations that also provide ``attach_table(table)`` receive the
    outer builder's table before they are rendered.
    """

    def render(self) -> str:
        ...


def is_renderable(value: object) -> bool:
    """Return True if ``value`` exposes a callable ``render``."""
    return isinstance(value, Renderable) and callable(getattr(value, "render", None))


__all__ = [
    "Renderable",
    "is_renderable",
]
