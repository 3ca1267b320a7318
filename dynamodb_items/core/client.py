"""
Shared DynamoDB client

The package talks to DynamoDB through one low-level boto3 client per process.
It is created on first use by ``connect()`` and reused by every item helper
afterwards; it is never closed or replaced.

This module also owns the translation of botocore ``ClientError`` into the
package's domain exceptions, so every operation reports failures the same way.
"""

import logging
import threading
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConflictError,
    ConnectionError,
    RetryableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_client = None
_client_lock = threading.Lock()


def connect(config: Optional[DynamoDBConfig] = None, session: Optional[boto3.Session] = None):
    """Return the process-wide DynamoDB client, creating it on first call.

    Args:
        config: Connection settings; defaults to ``DynamoDBConfig.from_env()``
        session: Optional boto3 session to build the client from

    Returns:
        boto3 DynamoDB client

    Raises:
        ConnectionError: If the client cannot be created
    """
    global _client
    if _client is None:
        with _client_lock:
            # another thread may have created it while we waited
            if _client is None:
                _client = _create_client(config, session)
    return _client


def _create_client(config: Optional[DynamoDBConfig], session: Optional[boto3.Session]):
    try:
        if config is None:
            config = DynamoDBConfig.from_env()
        if config.enable_debug_logging:
            logging.getLogger("dynamodb_items").setLevel(logging.DEBUG)

        if session is None:
            session = boto3.Session(
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
                region_name=config.region_name
            )

        client = session.client('dynamodb', **config.client_kwargs())
        logger.debug(f"Created DynamoDB client for region {config.region_name}")
        return client
    except Exception as e:
        logger.error(f"Failed to create DynamoDB client: {e}")
        raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map a DynamoDB ClientError to a domain exception.

    Args:
        error: The botocore ClientError
        operation: The operation that failed (e.g. "GetItem", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional item identifier for context

    Returns:
        Domain exception carrying ``error`` as ``original_error``
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code == 'TransactionConflictException':
        return ConflictError(f"Transaction conflict - {full_message}", resource_id, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        # raised for a missing table or index; a missing item is an empty GetItem response
        return ConnectionError(f"Table not found - {full_message}", original_error=error)

    elif error_code in ['ValidationException', 'ItemCollectionSizeLimitExceededException']:
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'InternalServerError', 'ServiceUnavailable'
    ]:
        return RetryableError(f"Throttling or service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException',
        'ExpiredTokenException', 'InvalidSignatureException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)
