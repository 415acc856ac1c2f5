"""Resource module exports."""

from .items import Items

__all__ = [
    "Items",
]
