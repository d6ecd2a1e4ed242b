"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Type, TypeVar, Any, List

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """Base schema with common functionality for all schemas.

    Fields are declared in snake_case and exposed in camelCase on the wire;
    both spellings are accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel
    )

    @classmethod
    def from_entity(cls: Type[T], entity: Any) -> T:
        """Create a schema instance from an in-memory entity"""
        return cls.model_validate(entity)

    @classmethod
    def from_entities(cls: Type[T], entities: List[Any]) -> List[T]:
        return [cls.model_validate(entity) for entity in entities]

class MessageResponse(BaseSchema):
    message: str
