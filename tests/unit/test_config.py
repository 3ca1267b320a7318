import os
from unittest.mock import patch

import pytest

from dynamodb_items.config import DynamoDBConfig


class TestDynamoDBConfig:
    """Test cases for DynamoDBConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}):
            config = DynamoDBConfig()

            assert config.region_name == "us-west-2"
            assert config.max_pool_connections == 50
            assert config.retries == 3
            assert config.timeout_seconds == 30.0

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_REGION": "eu-west-1",
            "DYNAMODB_ENDPOINT_URL": "http://localhost:8000",
            "DYNAMODB_DEBUG_LOGGING": "true"
        }

        with patch.dict(os.environ, env_vars):
            config = DynamoDBConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:8000"
            assert config.enable_debug_logging is True

    def test_local_development_config(self):
        """Test local development configuration."""
        config = DynamoDBConfig.for_local_development()

        assert config.aws_access_key_id == "local"
        assert config.aws_secret_access_key == "local"
        assert config.endpoint_url == "http://localhost:8000"
        assert config.enable_debug_logging is True

    def test_client_kwargs(self):
        """Client kwargs carry region, endpoint and botocore settings."""
        config = DynamoDBConfig(
            region_name="ap-south-1",
            endpoint_url="http://localhost:8000",
            retries=5,
            max_pool_connections=10,
            timeout_seconds=2.5
        )

        kwargs = config.client_kwargs()

        assert kwargs['region_name'] == "ap-south-1"
        assert kwargs['endpoint_url'] == "http://localhost:8000"
        assert kwargs['config'].retries == {'max_attempts': 5}
        assert kwargs['config'].max_pool_connections == 10
        assert kwargs['config'].read_timeout == 2.5
        assert kwargs['config'].connect_timeout == 2.5

    def test_client_kwargs_without_endpoint(self):
        config = DynamoDBConfig(region_name="us-east-1", endpoint_url=None)

        assert 'endpoint_url' not in config.client_kwargs()

    def test_region_validation(self):
        """Test region validation."""
        with pytest.raises(ValueError, match="AWS region name is required"):
            DynamoDBConfig(region_name="")
