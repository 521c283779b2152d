"""
User CQRS APIs

Queries (Read Operations):
- Point lookup by email with GetItem
- Full listing with Scan

Commands (Write Operations):
- Create guarded by a conditional write on the email key

Usage:
    read_api = UserReadApi(config, gateway)
    write_api = UserWriteApi(config, gateway)
"""

from .queries import UserReadApi
from .commands import UserWriteApi

__all__ = [
    "UserReadApi",
    "UserWriteApi",
]
