import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError

# Load environment variables from .env file if it exists
load_dotenv()

TABLE_NAME_ENV_VAR = "DYNAMODB_TABLE_NAME"


class RegistryConfig(BaseModel):
    """Configuration for the user registry and its DynamoDB connection."""

    table_name: str = Field(
        default_factory=lambda: os.getenv(TABLE_NAME_ENV_VAR, ""),
        validate_default=True,
        description="Name of the DynamoDB table holding user records"
    )

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of attempts botocore makes before giving up"
    )

    timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for registry operations"
    )

    @field_validator('table_name')
    @classmethod
    def validate_table_name(cls, v):
        """Validate that a table name was supplied."""
        v = (v or "").strip()
        if not v:
            raise ValueError(f"missing environment variable {TABLE_NAME_ENV_VAR}")
        return v

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @classmethod
    def from_env(cls) -> 'RegistryConfig':
        """Create configuration from environment variables.

        Returns:
            RegistryConfig instance

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        try:
            return cls()
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err['loc']) for err in e.errors()]
            setting = TABLE_NAME_ENV_VAR if 'table_name' in fields else ", ".join(fields)
            raise ConfigurationError(f"Invalid registry configuration: {e}", setting, e) from e

    @classmethod
    def for_local_development(cls, table_name: str = "users") -> 'RegistryConfig':
        """Create configuration for DynamoDB Local.

        Args:
            table_name: Table to use on the local endpoint

        Returns:
            RegistryConfig instance configured for local development
        """
        return cls(
            table_name=table_name,
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        frozen=True
    )
