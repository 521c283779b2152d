from typing import Any, Dict, Optional


class UserRegistryError(Exception):
    """Root of every error the registry raises.

    Besides a message, an error records which DynamoDB operation it came
    from and which user key it concerns, when those are known. The router
    logs both when a request fails.

    Attributes:
        message: Human-readable error message
        operation: DynamoDB operation name ("PutItem", "GetItem", "Scan")
        key: Key of the user involved (usually the email)
        original_error: The exception this one was raised from
        context: Extra details rendered after the message
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        key: Optional[Any] = None,
    ):
        self.message = message
        self.original_error = original_error
        self.operation = operation
        self.key = key
        self.context = dict(context or {})
        super().__init__(message)

    def describe_target(self, default_operation: str = "request", default_key: Optional[Any] = None) -> str:
        """Render ``"<operation> for <key>"`` for log lines, filling gaps from the caller."""
        operation = self.operation or default_operation
        key = self.key if self.key is not None else default_key
        return f"{operation} for {key}" if key is not None else operation

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = "; ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [{details}]"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, operation={self.operation!r}, "
            f"key={self.key!r}, original_error={self.original_error!r})"
        )
