"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around the boto3 DynamoDB Table
resource. It exposes exactly the operations the registry issues:

- put_item: PutItem, optionally conditional (used for create-if-absent)
- get_item: GetItem point lookup by partition key
- scan / scan_all: full-table Scan

Every botocore ClientError is classified by its error code in
map_dynamodb_error() and re-raised as a domain exception, so callers branch
on exception type rather than on message text.

Client-side botocore failures (BotoCoreError: no endpoint, timeouts, missing
credentials) never reach DynamoDB; map_botocore_error() wraps them in
TransportError carrying the operation and key.

The boto3 session, resource and Table handle are created lazily and reused
for the lifetime of the gateway, which in Lambda means one per container.
"""

import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import RegistryConfig
from ..exceptions import (
    ConflictError,
    RetryableError,
    StoreValidationError,
    TransportError,
)

logger = logging.getLogger(__name__)

THROTTLING_ERROR_CODES = frozenset([
    'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
    'ThrottlingException', 'TooManyRequestsException',
])

SERVICE_ERROR_CODES = frozenset([
    'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
    'InternalFailure', 'RequestTimeoutException',
])

AUTH_ERROR_CODES = frozenset([
    'UnrecognizedClientException', 'AccessDeniedException',
    'ExpiredTokenException', 'InvalidSignatureException',
    'IncompleteSignatureException',
])


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context

    Returns:
        ConflictError for conditional check failures, otherwise a
        TransportError (or one of its subclasses)
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error, operation=operation)

    elif error_code == 'ResourceNotFoundException':
        return TransportError(f"Table not found - {full_message}", original_error=error, operation=operation, key=resource_id)

    elif error_code == 'ValidationException':
        return StoreValidationError(f"Validation failed - {full_message}", original_error=error, operation=operation, key=resource_id)

    elif error_code in THROTTLING_ERROR_CODES:
        return RetryableError(f"Throttling - {full_message}", original_error=error, operation=operation, key=resource_id)

    elif error_code in SERVICE_ERROR_CODES:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error, operation=operation, key=resource_id)

    elif error_code in AUTH_ERROR_CODES:
        return TransportError(f"Authentication/authorization failed - {full_message}", original_error=error, operation=operation, key=resource_id)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to TransportError")
    return TransportError(f"DynamoDB operation failed - {full_message}", original_error=error, operation=operation, key=resource_id)


def map_botocore_error(
    error: BotoCoreError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> TransportError:
    """Wrap a client-side botocore failure (no DynamoDB response at all).

    Covers connection failures, timeouts and missing credentials, e.g.
    EndpointConnectionError, ReadTimeoutError, NoCredentialsError.
    """
    return TransportError(
        f"{operation} on {table_name} failed: {error}",
        original_error=error,
        context={'error_type': type(error).__name__},
        operation=operation,
        key=resource_id,
    )


class TableGateway:
    """
    Thin gateway for DynamoDB table operations.

    Designed to be used by the user read/write APIs rather than directly by
    the router.
    """

    def __init__(self, config: RegistryConfig, table_name: Optional[str] = None):
        """Initialize table gateway.

        Args:
            config: Registry configuration
            table_name: Table to operate on (defaults to config.table_name)
        """
        self.config = config
        self.table_name = table_name or config.table_name
        self._dynamodb = None
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise TransportError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._dynamodb

    @property
    def table(self):
        """Get boto3 DynamoDB Table resource."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except TransportError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise TransportError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def put_item(self, item: Dict[str, Any], condition_expression=None) -> None:
        """
        Put item into DynamoDB table.

        Args:
            item: Item to store
            condition_expression: Optional condition for put operation

        Example:
            gateway.put_item(
                item={'email': 'a@x.com', 'user_name': 'Ann'},
                condition_expression=Attr('email').not_exists()
            )
        """
        try:
            put_kwargs = {'Item': item}
            if condition_expression is not None:
                put_kwargs['ConditionExpression'] = condition_expression

            self.table.put_item(**put_kwargs)
            logger.debug(f"Put item in {self.table_name}: {item}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, item.get('email')) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "PutItem", self.table_name, item.get('email')) from e

    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Fetch a single item by primary key.

        Args:
            key: Primary key of the item

        Returns:
            The item, or None when no item has that key
        """
        try:
            response = self.table.get_item(Key=key)
        except ClientError as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, key.get('email')) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "GetItem", self.table_name, key.get('email')) from e
        return response.get('Item')

    def scan(self, **kwargs) -> Dict[str, Any]:
        """
        Execute a single DynamoDB Scan request.

        Args:
            **kwargs: All boto3 scan parameters

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.scan(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "Scan", self.table_name) from e

    def scan_all(self, **kwargs) -> List[Dict[str, Any]]:
        """
        Scan the whole table, following LastEvaluatedKey across 1 MB pages.

        Args:
            **kwargs: Extra boto3 scan parameters applied to every page

        Returns:
            Every item in store-defined order
        """
        items: List[Dict[str, Any]] = []
        scan_kwargs = dict(kwargs)
        while True:
            response = self.scan(**scan_kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            scan_kwargs['ExclusiveStartKey'] = last_key


def create_table_gateway(config: RegistryConfig) -> TableGateway:
    """
    Factory function to create a TableGateway for the configured table.

    Args:
        config: Registry configuration

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, config.table_name)
