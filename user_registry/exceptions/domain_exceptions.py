"""
Domain-Specific Exceptions for the User Registry

Every failure the registry can produce is one of the classes below. The
router branches on these types to pick a response status; nothing in the
package inspects error message text.

Organized by category:
1. Start-up Errors
2. Request Validation Errors
3. Lookup and Conflict Errors
4. Store Transport Errors
"""

from typing import Any, Dict, Optional

from .base import UserRegistryError


# =============================================================================
# Start-up Errors
# =============================================================================

class ConfigurationError(UserRegistryError):
    """Raised when a required setting is missing or invalid.

    Fatal at process start: the Lambda must not begin serving requests.
    """

    def __init__(self, message: str, setting: Optional[str] = None, original_error: Optional[Exception] = None):
        self.setting = setting
        context = {}
        if setting:
            context['setting'] = setting
        super().__init__(message, original_error, context)


# =============================================================================
# Request Validation Errors
# =============================================================================

class ValidationError(UserRegistryError):
    """Raised when an inbound payload cannot be turned into a user record.

    Used for:
    - Request bodies that are not JSON or not a JSON object
    - Missing or blank email
    - Fields of the wrong type
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Lookup and Conflict Errors
# =============================================================================

class NotFoundError(UserRegistryError):
    """Raised when no user exists for a given email."""

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        self.table_name = table_name
        message = f"No user in table '{table_name}' with key {key}"
        super().__init__(message, original_error, {'table_name': table_name}, operation="GetItem", key=key)


class ConflictError(UserRegistryError):
    """Raised when a conditional write fails because the key already exists.

    Expected and recoverable: a second create for the same email.
    """

    def __init__(
        self,
        message: str,
        resource_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
        operation: Optional[str] = "PutItem",
    ):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: Key of the conflicting item (the email)
            original_error: The original exception that caused this error
            operation: Write that was rejected
        """
        self.resource_id = resource_id
        super().__init__(message, original_error, operation=operation, key=resource_id)


# =============================================================================
# Store Transport Errors
# =============================================================================

class TransportError(UserRegistryError):
    """Raised when talking to DynamoDB fails.

    Used for:
    - Network connectivity issues and timeouts (botocore BotoCoreError)
    - Authentication/authorization failures
    - Missing table
    - Items that cannot be marshalled to or from the store
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        key: Optional[Any] = None,
    ):
        super().__init__(message, original_error, context, operation=operation, key=key)


class StoreValidationError(TransportError):
    """Raised when DynamoDB rejects a request or returns an unreadable item."""


class RetryableError(TransportError):
    """Raised for throttling and transient service failures.

    The registry itself never retries; the classification is kept so the
    invoking environment can decide.
    """

    def __init__(
        self,
        message: str,
        retry_after_seconds: Optional[int] = None,
        original_error: Optional[Exception] = None,
        operation: Optional[str] = None,
        key: Optional[Any] = None,
    ):
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context, operation=operation, key=key)
