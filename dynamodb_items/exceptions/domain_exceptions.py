"""
Domain exceptions raised by item helpers.

Service errors are translated into these classes by
``core.client.map_dynamodb_error``; the botocore error stays available on
``original_error``.
"""

from typing import Any, Dict, Optional

from .base import DynamoDBWrapperError


class ValidationError(DynamoDBWrapperError):
    """Raised when local input cannot be turned into a valid request.

    Used for:
    - Item identity without a hash key name
    - Empty or unserialisable update expressions
    - ValidationException responses from DynamoDB
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


class ItemNotFoundError(DynamoDBWrapperError):
    """Raised when GetItem returns no item for the requested key."""

    def __init__(
        self,
        item_type_name: str,
        table_name: str,
        key: dict,
        hash_key_value: Any = None,
        sort_key_value: Any = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize item not found error.

        Args:
            item_type_name: Type tag of the missing item (e.g. "User")
            table_name: Name of the DynamoDB table
            key: The wire-level key that was looked up
            hash_key_value: Hash key value as given by the caller
            sort_key_value: Sort key value as given by the caller
            original_error: The original exception, if any
        """
        self.item_type_name = item_type_name
        self.table_name = table_name
        self.key = key
        message = f"{item_type_name or 'Item'} does not exist: [{hash_key_value}:{sort_key_value}]"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


class ConflictError(DynamoDBWrapperError):
    """Raised when a conditional write fails.

    Used for:
    - ConditionalCheckFailedException (Create of an existing item)
    - TransactionConflictException
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


class ConnectionError(DynamoDBWrapperError):
    """Raised when the client cannot be created, or the service rejects the caller or has no such table."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(DynamoDBWrapperError):
    """Raised for throttling and transient service failures.

    Nothing in this package retries; callers decide.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
