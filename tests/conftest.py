"""
Test configuration and fixtures for dynamodb_items.

Provides a moto-backed DynamoDB with two tables and resets the shared client
around every test so each test gets a client bound to its own mock.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

# Add parent directory to path so we can import dynamodb_items
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_items import DynamoDBConfig
from dynamodb_items.core import client as client_module


@pytest.fixture(autouse=True)
def reset_shared_client(monkeypatch):
    """Start every test without a shared client."""
    monkeypatch.setattr(client_module, "_client", None)
    yield


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        enable_debug_logging=False
    )


@pytest.fixture
def mock_dynamodb_client():
    """Raw moto DynamoDB client used to create and inspect tables."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')


@pytest.fixture
def events_table(mock_dynamodb_client):
    """Hash + range table with a GSI on event type."""
    mock_dynamodb_client.create_table(
        TableName='test_events',
        KeySchema=[
            {'AttributeName': 'account_id', 'KeyType': 'HASH'},
            {'AttributeName': 'event_id', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'account_id', 'AttributeType': 'S'},
            {'AttributeName': 'event_id', 'AttributeType': 'S'},
            {'AttributeName': 'event_type', 'AttributeType': 'S'}
        ],
        GlobalSecondaryIndexes=[
            {
                'IndexName': 'TypeIndex',
                'KeySchema': [
                    {'AttributeName': 'event_type', 'KeyType': 'HASH'},
                    {'AttributeName': 'event_id', 'KeyType': 'RANGE'}
                ],
                'Projection': {'ProjectionType': 'ALL'},
                'ProvisionedThroughput': {'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}
            }
        ],
        BillingMode='PROVISIONED',
        ProvisionedThroughput={'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}
    )
    return 'test_events'


@pytest.fixture
def users_table(mock_dynamodb_client):
    """Hash-only table."""
    mock_dynamodb_client.create_table(
        TableName='test_users',
        KeySchema=[
            {'AttributeName': 'user_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'user_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return 'test_users'


@pytest.fixture
def fake_client(monkeypatch):
    """Install a Mock as the shared client to check request shapes."""
    client = Mock()
    client.get_item.return_value = {'Item': {'user_id': {'S': 'u1'}}}
    client.put_item.return_value = {}
    client.update_item.return_value = {}
    client.delete_item.return_value = {}
    client.query.return_value = {'Items': [], 'Count': 0}
    client.scan.return_value = {'Items': [], 'Count': 0}
    monkeypatch.setattr(client_module, "_client", client)
    return client
