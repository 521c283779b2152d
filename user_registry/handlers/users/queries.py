"""
User Read API

Two access patterns:
- get_by_email: GetItem on the partition key
- list_users: full-table Scan

list_users is unbounded. The table is expected to stay small; there is no
HTTP-level pagination.
"""

import logging
from typing import List, Optional

from ...config import RegistryConfig
from ...core import TableGateway, create_table_gateway
from ...exceptions import NotFoundError
from ...models import User

logger = logging.getLogger(__name__)


class UserReadApi:
    """Read-only API for user records."""

    def __init__(self, config: RegistryConfig, gateway: Optional[TableGateway] = None):
        """Initialize read API with configuration and an optional shared gateway."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email.

        DynamoDB Operation: GetItem with primary key

        Args:
            email: User email (partition key)

        Returns:
            User if found, None otherwise

        Raises:
            TransportError: DynamoDB failure or unreadable stored item
        """
        logger.debug(f"Searching for user {email}")
        item = self.gateway.get_item({'email': email})
        if item is None:
            return None
        return User.from_dynamodb_item(item)

    def get_user(self, email: str) -> User:
        """
        Get a user by email, raising when absent.

        Raises:
            NotFoundError: No user with this email
        """
        user = self.get_by_email(email)
        if user is None:
            raise NotFoundError(self.gateway.table_name, {'email': email})
        return user

    def list_users(self) -> List[User]:
        """
        List every user in the table.

        DynamoDB Operation: Scan (all pages)

        Returns:
            Users in store-defined order; empty list for an empty table
        """
        items = self.gateway.scan_all()
        users = [User.from_dynamodb_item(item) for item in items]
        logger.info(f"Listed {len(users)} users from {self.gateway.table_name}")
        return users
