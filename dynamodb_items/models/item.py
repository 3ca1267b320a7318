"""Wire-level item types.

An ``Item`` is what DynamoDB's low-level API sends and receives: a mapping of
attribute name to a tagged value such as ``{"S": "abc"}`` or ``{"N": "12"}``.
"""

from typing import Any, Dict, List, Mapping

Attributes = Dict[str, Any]


class Item(Dict[str, Dict[str, Any]]):
    """Mapping of attribute name to DynamoDB tagged value."""

    def merge(self, other: Mapping[str, Dict[str, Any]]) -> "Item":
        """Copy every entry of ``other`` into this item; ``other`` wins on conflicts."""
        for name, value in other.items():
            self[name] = value
        return self


Items = List[Item]
