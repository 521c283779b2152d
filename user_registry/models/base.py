"""
Base Model Components and Mixins

DynamoDBMixin is the single place where a model's Python field names are
translated into the attribute names stored in DynamoDB. Models declare the
renamed fields in ``__dynamodb_attribute_names__``; every other field is
stored under its own name.

```python
class User(DynamoDBMixin, BaseModel):
    __dynamodb_attribute_names__ = {'name': 'user_name'}

    email: str
    name: Optional[str] = None

User(email='a@x.com', name='Ann').to_dynamodb_item()
# {'email': 'a@x.com', 'user_name': 'Ann'}
```

``None`` values are never written, so optional attributes are absent from
the item rather than stored as NULL.
"""

import logging
from typing import Any, ClassVar, Dict

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class DynamoDBMixin(BaseModel):
    """
    Mixin providing DynamoDB serialization and deserialization functionality.

    Features:
    - Field renaming between the model and the stored item
    - Omission of unset optional attributes
    - Translation of model validation failures into StoreValidationError
    """

    __dynamodb_attribute_names__: ClassVar[Dict[str, str]] = {}

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert model to DynamoDB-compatible item.

        Returns:
            Dictionary ready to pass as ``Item`` to PutItem

        Example:
            item = user.to_dynamodb_item()
            gateway.put_item(item)
        """
        renames = self.__dynamodb_attribute_names__
        dumped_item = self.model_dump(exclude_none=True)
        return {renames.get(k, k): v for k, v in dumped_item.items()}

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from DynamoDB item.

        Reverse of to_dynamodb_item(). Attributes the model does not know
        about are ignored by model validation.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Model instance

        Raises:
            StoreValidationError: If the item cannot be parsed into the model
        """
        # stored attribute -> the key model validation accepts (the alias when one is set)
        reverse = {
            stored: cls.model_fields[field].alias or field
            for field, stored in cls.__dynamodb_attribute_names__.items()
        }
        try:
            data = {reverse.get(k, k): v for k, v in item.items()}
            return cls.model_validate(data)
        except Exception as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            from ..exceptions import StoreValidationError
            raise StoreValidationError(f"Failed to convert DynamoDB item to {cls.__name__}: {e}", e) from e
