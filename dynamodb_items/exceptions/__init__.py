from .base import DynamoDBWrapperError
from .domain_exceptions import (
    ConflictError,
    ConnectionError,
    ItemNotFoundError,
    RetryableError,
    ValidationError,
)

__all__ = [
    "DynamoDBWrapperError",
    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "RetryableError",
    "ValidationError",
]
