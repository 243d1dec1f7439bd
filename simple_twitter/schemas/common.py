"""Shared schema base classes and response envelopes."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model that reads ORM attributes and speaks camelCase JSON."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(BaseModel, Generic[DataT]):
    """Envelope for every successful response."""

    status: Literal["success"] = "success"
    data: DataT


class ErrorResponse(BaseModel):
    """Envelope for every error response."""

    status: Literal["error"] = "error"
    message: str
