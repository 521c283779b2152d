"""
Core infrastructure components for DynamoDB operations.

- TableGateway: Thin wrapper over boto3 DynamoDB operations
- map_dynamodb_error: ClientError classification by error code
"""

from .table_gateway import TableGateway, create_table_gateway, map_botocore_error, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_botocore_error",
    "map_dynamodb_error",
]
