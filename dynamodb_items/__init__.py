"""
dynamodb_items

Object-style helpers over the low-level DynamoDB client: build item keys,
marshal scalar attributes, and run Get/List/Scan/Put/Update/Delete calls
through one lazily created, process-wide boto3 client.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    DynamoDBWrapperError,
    ItemNotFoundError,
    RetryableError,
    ValidationError,
)
from .models import Attributes, Item, ItemBase, Items
from .core import connect, map_dynamodb_error
from .expressions import UpdateExpressionBuilder
from .handlers import (
    ItemCreateInput,
    ItemReaderInput,
    ItemWriterInput,
    new_item_reader_input,
    new_item_writer_input,
)
from .params import RecordParamHelper
from .utils import attributes_to_item, get_attribute_value, item_to_dict, items_to_dicts

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "DynamoDBWrapperError",
    "ItemNotFoundError",
    "RetryableError",
    "ValidationError",

    # Models
    "Attributes",
    "Item",
    "Items",
    "ItemBase",

    # Client
    "connect",
    "map_dynamodb_error",

    # Operations
    "ItemCreateInput",
    "ItemReaderInput",
    "ItemWriterInput",
    "new_item_reader_input",
    "new_item_writer_input",
    "UpdateExpressionBuilder",
    "RecordParamHelper",

    # Marshalling
    "attributes_to_item",
    "get_attribute_value",
    "item_to_dict",
    "items_to_dicts",
]
