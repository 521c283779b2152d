"""
Domain Models for the User Registry

The registry stores a single entity, the user. One model serves all three
representations:

- Python: ``User(email=..., username=...)``, read back as ``user.name``
- Transport (JSON): ``{"email": ..., "username": ...}`` via ``to_transport()``
- DynamoDB item: ``{"email": ..., "user_name": ...}`` via ``to_dynamodb_item()``

An absent or empty name is omitted from both the transport body and the
stored item.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import DynamoDBMixin


class User(DynamoDBMixin, BaseModel):
    """A registered user, keyed by email."""

    __dynamodb_attribute_names__ = {'name': 'user_name'}

    # input is accepted under ``username`` only, never under the attribute name
    model_config = ConfigDict(
        extra='ignore',
        frozen=True,
    )

    email: str = Field(..., description="Partition key; unique across the table")
    name: Optional[str] = Field(None, alias="username", description="Display name")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Email must contain something besides whitespace; it is stored exactly as given."""
        if not v.strip():
            raise ValueError("email must not be empty")
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        # empty means absent
        return v or None

    def to_transport(self) -> Dict[str, Any]:
        """Render the JSON body shape returned to HTTP callers."""
        return self.model_dump(by_alias=True, exclude_none=True)
