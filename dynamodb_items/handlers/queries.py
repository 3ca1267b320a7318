"""
Item read operations

``ItemReaderInput`` issues GetItem, Query and Scan for an item identity.
Query matches every present key attribute by equality; a reader without a
sort key value therefore lists all items under its hash key.
"""

import logging
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from ..config import DynamoDBConfig
from ..core import connect, map_dynamodb_error
from ..exceptions import ItemNotFoundError, ValidationError
from ..models import ItemBase
from ..utils import build_key_conditions

logger = logging.getLogger(__name__)


class ItemReaderInput(ItemBase):
    """Item identity with read operations, optionally against a secondary index."""

    index_name: str = ""

    def get(self, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Fetch the item at ``get_key()``.

        Returns:
            Raw GetItem response; ``response['Item']`` is always present

        Raises:
            ItemNotFoundError: No item stored under this key
        """
        client = connect(config)
        key = self.get_key()
        try:
            response = client.get_item(TableName=self.table_name, Key=key)
        except ClientError as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, self.resource_id()) from e

        if not response or response.get('Item') is None:
            raise ItemNotFoundError(
                self.item_type_name,
                self.table_name,
                key,
                self.hash_key_value,
                self.sort_key_value
            )
        return response

    def list(self, limit: int = 0, reverse: bool = False, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Query items whose key attributes equal this reader's key.

        Args:
            limit: Maximum number of items to evaluate; 0 means no limit
            reverse: Return items in descending sort key order
            config: Connection settings used if the client is not created yet

        Returns:
            Raw Query response
        """
        client = connect(config)
        params: Dict[str, Any] = {
            'TableName': self.table_name,
            'KeyConditions': build_key_conditions(self.get_key()),
            'ScanIndexForward': not reverse
        }
        if self.index_name:
            params['IndexName'] = self.index_name
        if limit > 0:
            params['Limit'] = limit

        try:
            response = client.query(**params)
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name) from e

        logger.debug(f"Query on {self.table_name} returned {response.get('Count', 0)} items")
        return response

    def scan(self, limit: int = 0, config: Optional[DynamoDBConfig] = None) -> Dict[str, Any]:
        """Scan the table (or ``index_name``).

        Args:
            limit: Maximum number of items to evaluate; 0 means no limit

        Returns:
            Raw Scan response
        """
        client = connect(config)
        params: Dict[str, Any] = {'TableName': self.table_name}
        if self.index_name:
            params['IndexName'] = self.index_name
        if limit > 0:
            params['Limit'] = limit
        else:
            logger.warning(f"Scan on {self.table_name} without Limit - consider adding one")

        try:
            return client.scan(**params)
        except ClientError as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e


def new_item_reader_input(
    item_type_name: str,
    table_name: str,
    hash_key_name: str,
    sort_key_name: str = "",
    hash_key_value: Any = None,
    sort_key_value: Any = None,
) -> ItemReaderInput:
    """Build an ItemReaderInput with no index selected.

    Raises:
        ValidationError: Missing hash key name
    """
    try:
        return ItemReaderInput(
            item_type_name=item_type_name,
            table_name=table_name,
            hash_key_name=hash_key_name,
            hash_key_value=hash_key_value,
            sort_key_name=sort_key_name,
            sort_key_value=sort_key_value,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {item_type_name or 'item'} identity: {e}", original_error=e) from e
