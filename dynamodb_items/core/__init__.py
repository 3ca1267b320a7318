"""
Core infrastructure: the shared DynamoDB client and service error mapping.
"""

from .client import connect, map_dynamodb_error

__all__ = [
    "connect",
    "map_dynamodb_error",
]
