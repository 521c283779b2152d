"""
User Registry

A DynamoDB-backed user registry served by AWS Lambda through a Function URL.
Users are keyed by email; creation is guarded by a conditional write so an
email can only ever be registered once.
"""

from .config import RegistryConfig
from .exceptions import (
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RetryableError,
    StoreValidationError,
    TransportError,
    UserRegistryError,
    ValidationError,
)
from .models import User
from .core import (
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    UserReadApi,
    UserWriteApi,
)
from .context import RegistryContext
from .router import HttpMethod, HttpRequest, HttpResponse, Router
from .app import configure_logging, create_lambda_handler, make_handler

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "RegistryConfig",

    # Exceptions
    "ConfigurationError",
    "ConflictError",
    "NotFoundError",
    "RetryableError",
    "StoreValidationError",
    "TransportError",
    "UserRegistryError",
    "ValidationError",

    # Models
    "User",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # CQRS APIs
    "UserReadApi",
    "UserWriteApi",

    # Request handling
    "RegistryContext",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "Router",
    "configure_logging",
    "create_lambda_handler",
    "make_handler",
]
