"""
Item write operations

``ItemWriterInput`` carries an item's identity and attributes and issues the
DynamoDB write calls for it:

- create / create_with_item: PutItem guarded by attribute_not_exists on the hash key
- upsert: unconditional PutItem
- update / update_with_builder: UpdateItem with a SET expression
- delete: DeleteItem by key

Each call returns the raw client response.
"""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from ..config import DynamoDBConfig
from ..core import connect, map_dynamodb_error
from ..exceptions import ValidationError
from ..expressions import UpdateExpressionBuilder
from ..models import Item, ItemBase

logger = logging.getLogger(__name__)


class ItemWriterInput(ItemBase):
    """Item identity plus attributes, with write operations."""

    def update(self, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Set every attribute in ``attributes`` on the stored item.

        Raises:
            ValidationError: No attributes to set
        """
        builder = UpdateExpressionBuilder()
        for name, value in self.attributes.items():
            builder.set(name, value)
        return self.update_with_builder(builder, config)

    def update_with_builder(
        self,
        builder: UpdateExpressionBuilder,
        config: Optional[DynamoDBConfig] = None
    ) -> Dict[str, Any]:
        """Apply a prepared update expression to the item at ``get_key()``.

        Args:
            builder: Update expression with at least one clause
            config: Connection settings used if the client is not created yet

        Returns:
            Raw UpdateItem response
        """
        client = connect(config)
        expression = builder.build()

        params = {
            'TableName': self.table_name,
            'Key': self.get_key(),
            **expression
        }
        try:
            response = client.update_item(**params)
        except ClientError as e:
            raise map_dynamodb_error(e, "UpdateItem", self.table_name, self.resource_id()) from e

        logger.info(f"Updated {self.item_type_name} {self.describe_key()} in {self.table_name}: {builder.names()}")
        return response

    def create_with_item(self, item: Item, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Put ``item`` (with this item's key merged in) only if it does not exist yet.

        Raises:
            ConflictError: An item with this hash key already exists
        """
        client = connect(config)
        item = Item(item).merge(self.get_key())
        try:
            response = client.put_item(
                TableName=self.table_name,
                Item=item,
                ConditionExpression="attribute_not_exists(#hk)",
                ExpressionAttributeNames={'#hk': self.hash_key_name}
            )
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, self.resource_id()) from e

        logger.info(f"Created {self.item_type_name} {self.describe_key()} in {self.table_name}")
        return response

    def create(self, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Create this item; fails with ConflictError if it already exists."""
        return self.create_with_item(self.get_puttable_item(), config)

    def upsert(self, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Write this item, replacing any existing item with the same key."""
        client = connect(config)
        try:
            response = client.put_item(
                TableName=self.table_name,
                Item=self.get_puttable_item()
            )
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, self.resource_id()) from e

        logger.info(f"Upserted {self.item_type_name} {self.describe_key()} in {self.table_name}")
        return response

    def delete(self, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Delete the item at ``get_key()``. Deleting a missing item is not an error."""
        client = connect(config)
        try:
            response = client.delete_item(
                TableName=self.table_name,
                Key=self.get_key()
            )
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, self.resource_id()) from e

        logger.info(f"Deleted {self.item_type_name} {self.describe_key()} from {self.table_name}")
        return response


class ItemCreateInput(ItemWriterInput):
    """Writer input used by callers that only ever create items."""


def new_item_writer_input(
    item_type_name: str,
    table_name: str,
    hash_key_name: str,
    sort_key_name: str = "",
    hash_key_value: Any = None,
    sort_key_value: Any = None,
) -> ItemWriterInput:
    """Build an ItemWriterInput with an empty attribute map.

    Raises:
        ValidationError: Missing hash key name
    """
    try:
        return ItemWriterInput(
            item_type_name=item_type_name,
            table_name=table_name,
            hash_key_name=hash_key_name,
            hash_key_value=hash_key_value,
            sort_key_name=sort_key_name,
            sort_key_value=sort_key_value,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {item_type_name or 'item'} identity: {e}", original_error=e) from e
