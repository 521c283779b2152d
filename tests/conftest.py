"""
Test configuration and fixtures for the user registry.

Provides a moto-backed users table, a RegistryContext wired to it, and a
factory for Lambda Function URL events.
"""

import base64
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Add parent directory to path so we can import user_registry
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from user_registry import RegistryConfig, RegistryContext, make_handler

TEST_TABLE_NAME = "test_users"


@pytest.fixture
def registry_config():
    """Registry configuration for mocked testing."""
    return RegistryConfig(
        table_name=TEST_TABLE_NAME,
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def users_table(mock_dynamodb_resource):
    """Create the users table keyed by email."""
    return mock_dynamodb_resource.create_table(
        TableName=TEST_TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'email', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'email', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def registry_context(registry_config, users_table):
    """RegistryContext wired to the moto users table."""
    return RegistryContext.from_config(registry_config)


@pytest.fixture
def handler(registry_context):
    """Lambda handler bound to the moto-backed context."""
    return make_handler(registry_context)


def build_event(
    method: str,
    query: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
    base64_encoded: bool = False,
) -> Dict[str, Any]:
    """Build a Lambda Function URL (payload v2.0) event."""
    event: Dict[str, Any] = {
        "version": "2.0",
        "rawPath": "/",
        "requestContext": {"http": {"method": method, "path": "/"}},
        "isBase64Encoded": base64_encoded,
    }
    if query is not None:
        event["queryStringParameters"] = query
    if body is not None:
        raw = body if isinstance(body, str) else json.dumps(body)
        if base64_encoded:
            raw = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        event["body"] = raw
    return event


@pytest.fixture
def make_event():
    """Factory fixture for Function URL events."""
    return build_event
