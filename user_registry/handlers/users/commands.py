"""
User Write API

Create is the only mutation the registry supports. Uniqueness of the email
is enforced by DynamoDB itself through a conditional PutItem
(``attribute_not_exists(email)``), so two concurrent creates for the same
email can never both succeed.
"""

import logging
from typing import Optional

from boto3.dynamodb.conditions import Attr

from ...config import RegistryConfig
from ...core import TableGateway, create_table_gateway
from ...models import User

logger = logging.getLogger(__name__)


class UserWriteApi:
    """Write-only API for user records."""

    def __init__(self, config: RegistryConfig, gateway: Optional[TableGateway] = None):
        """Initialize write API with configuration and an optional shared gateway."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)

    def create_user(self, user: User) -> User:
        """
        Create a new user record.

        DynamoDB Operation: PutItem with ConditionExpression
        Condition: attribute_not_exists(email)

        Args:
            user: Validated user record

        Returns:
            The stored user

        Raises:
            ConflictError: A user with this email already exists
            TransportError: Any other DynamoDB failure
        """
        item = user.to_dynamodb_item()

        # TableGateway maps ConditionalCheckFailedException to ConflictError
        self.gateway.put_item(item, condition_expression=Attr('email').not_exists())
        logger.info(f"Created user: {user.email}")
        return user
