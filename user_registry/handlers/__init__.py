"""
Handler Layer for the User Registry

Application layer APIs split by CQRS: queries.py (read) and commands.py
(write) for each entity.

Architecture:
router -> handlers/ (this layer) -> core/ (TableGateway) -> DynamoDB
handlers/ (this layer) <- models/ (domain models)
"""

from .users.queries import UserReadApi
from .users.commands import UserWriteApi

__all__ = [
    'UserReadApi',
    'UserWriteApi',
]
