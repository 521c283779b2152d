# Base exception class
from .base import UserRegistryError

from .domain_exceptions import (
    ConfigurationError,
    ValidationError,
    NotFoundError,
    ConflictError,
    TransportError,
    StoreValidationError,
    RetryableError,
)

__all__ = [
    # Base exception
    "UserRegistryError",

    # Domain exceptions (alphabetically ordered)
    "ConfigurationError",
    "ConflictError",
    "NotFoundError",
    "RetryableError",
    "StoreValidationError",
    "TransportError",
    "ValidationError",
]
