"""
Item models

- Item / Items / Attributes: wire-level and plain attribute maps
- ItemBase: logical identity (table, keys, type tag, attributes)
"""

from .item import Attributes, Item, Items
from .base import ItemBase

__all__ = [
    "Attributes",
    "Item",
    "Items",
    "ItemBase",
]
