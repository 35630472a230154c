from smartquery.utils.decorators import traced

__all__ = [
    "traced",
]
