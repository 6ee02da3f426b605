"""JSON (de)serialization capability used by the dispatcher."""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JsonSerializer(ABC):
    """Parses text into typed values and renders typed values into text.

    Both directions report failure as ``None`` rather than raising, so the
    dispatcher can turn them into protocol errors.
    """

    @abstractmethod
    def serialize(self, value: BaseModel) -> Optional[str]:
        ...

    @abstractmethod
    def deserialize(self, json: str, model_type: Type[ModelT]) -> Optional[ModelT]:
        ...


class PydanticJsonSerializer(JsonSerializer):
    """Serializer backed by pydantic's JSON core."""

    def serialize(self, value: BaseModel) -> Optional[str]:
        try:
            return value.model_dump_json()
        except PydanticSerializationError as e:
            logger.debug(f"Failed to serialize {type(value).__name__}: {e}")
            return None

    def deserialize(self, json: str, model_type: Type[ModelT]) -> Optional[ModelT]:
        try:
            return model_type.model_validate_json(json)
        except ValidationError as e:
            logger.debug(f"Failed to deserialize {model_type.__name__}: {e.error_count()} error(s)")
            return None
