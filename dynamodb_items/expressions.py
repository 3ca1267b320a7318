"""
Update expression builder

Accumulates ``SET name = value`` clauses and renders them into the three
UpdateItem parameters. Every attribute name goes through an expression
attribute name placeholder so reserved words (``status``, ``name``, ...) are
safe to use.

Example:
    >>> builder = UpdateExpressionBuilder().set('status', 'active').set('count', 3)
    >>> builder.build()['UpdateExpression']
    'SET #n0 = :v0, #n1 = :v1'
"""

import logging
from decimal import Decimal
from typing import Any, Dict

from boto3.dynamodb.types import TypeSerializer

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()


def _to_serializable(value: Any) -> Any:
    # TypeSerializer rejects float; Decimal(str()) keeps the shortest repr
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_serializable(v) for v in value]
    return value


class UpdateExpressionBuilder:
    """Ordered collection of SET clauses for UpdateItem."""

    def __init__(self):
        self._clauses: Dict[str, Any] = {}

    def set(self, name: str, value: Any) -> "UpdateExpressionBuilder":
        """Set attribute ``name`` to ``value``. A repeated name replaces the earlier value."""
        self._clauses[name] = value
        return self

    def is_empty(self) -> bool:
        return not self._clauses

    def __len__(self) -> int:
        return len(self._clauses)

    def __contains__(self, name: str) -> bool:
        return name in self._clauses

    def names(self):
        return list(self._clauses)

    def build(self) -> Dict[str, Any]:
        """Render the clauses into UpdateItem parameters.

        Returns:
            Dict with UpdateExpression, ExpressionAttributeNames and
            ExpressionAttributeValues

        Raises:
            ValidationError: If there are no clauses or a value cannot be serialized
        """
        if self.is_empty():
            raise ValidationError("Update expression has no SET clauses")

        update_parts = []
        expression_names = {}
        expression_values = {}

        for i, (name, value) in enumerate(self._clauses.items()):
            attr_name = f"#n{i}"
            attr_value = f":v{i}"
            try:
                expression_values[attr_value] = _serializer.serialize(_to_serializable(value))
            except (TypeError, ValueError, ArithmeticError) as e:
                raise ValidationError(
                    f"Cannot serialize value for attribute '{name}': {e}",
                    errors={name: str(e)},
                    original_error=e
                ) from e
            expression_names[attr_name] = name
            update_parts.append(f"{attr_name} = {attr_value}")

        return {
            'UpdateExpression': "SET " + ", ".join(update_parts),
            'ExpressionAttributeNames': expression_names,
            'ExpressionAttributeValues': expression_values,
        }
