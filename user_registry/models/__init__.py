from .base import DynamoDBMixin
from .domain_models import User

__all__ = [
    "DynamoDBMixin",
    "User",
]
