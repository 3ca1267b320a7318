"""
Marshalling utilities

Helpers translating between plain Python values and DynamoDB's low-level
tagged value format, plus the key-condition map used by Query.

Only three scalar kinds are marshalled into item attributes and keys:

- ``str``   -> ``{"S": value}``
- ``int``   -> ``{"N": "<digits>"}``
- ``float`` -> ``{"N": "<value with 4 decimals>"}``

Everything else (including ``bool``, ``None``, ``Decimal``, collections) is
dropped rather than rejected.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from boto3.dynamodb.types import TypeDeserializer

from .models.item import Item

logger = logging.getLogger(__name__)

_deserializer = TypeDeserializer()


def get_attribute_value(value: Any) -> Optional[Dict[str, str]]:
    """Convert a scalar to a DynamoDB tagged value.

    Args:
        value: Python value to convert

    Returns:
        Tagged value, or None when the type is not supported

    Examples:
        >>> get_attribute_value("abc")
        {'S': 'abc'}
        >>> get_attribute_value(1.5)
        {'N': '1.5000'}
        >>> get_attribute_value(True) is None
        True
    """
    if value is None:
        return None
    # bool is an int subclass but is not a supported attribute type
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return {'S': value}
    if isinstance(value, int):
        return {'N': str(value)}
    if isinstance(value, float):
        return {'N': f"{value:.4f}"}
    return None


def attributes_to_item(attributes: Optional[Mapping[str, Any]]) -> Item:
    """Marshal an attribute map into an Item, skipping unsupported values."""
    item = Item()
    for name, value in (attributes or {}).items():
        av = get_attribute_value(value)
        if av is not None:
            item[name] = av
        else:
            logger.debug(f"Dropping attribute '{name}' with unsupported type {type(value).__name__}")
    return item


def item_to_dict(item: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Convert a wire-level item back to plain Python values.

    Numbers come back as ``Decimal`` (boto3's TypeDeserializer behaviour).
    """
    if not item:
        return {}
    return {name: _deserializer.deserialize(value) for name, value in item.items()}


def items_to_dicts(items: Optional[Iterable[Mapping[str, Any]]]) -> List[Dict[str, Any]]:
    """Convert the ``Items`` list of a Query or Scan response."""
    return [item_to_dict(item) for item in items or []]


def build_key_conditions(key: Mapping[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Build legacy ``KeyConditions`` with an EQ condition per key attribute.

    Args:
        key: Wire-level key, e.g. ``{'user_id': {'S': 'u1'}}``

    Returns:
        KeyConditions mapping for the Query API
    """
    conditions = {}
    for name, value in key.items():
        if not name:
            continue
        conditions[name] = {
            'ComparisonOperator': 'EQ',
            'AttributeValueList': [value]
        }
    return conditions


__all__ = [
    "get_attribute_value",
    "attributes_to_item",
    "item_to_dict",
    "items_to_dicts",
    "build_key_conditions",
]
