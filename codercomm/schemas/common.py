"""Shared envelope and base model for API payloads."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapped around every successful response."""

    success: bool = True
    data: DataT | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    errors: list[str]
    message: str


__all__ = ["CamelModel", "ApiResponse", "ErrorResponse"]
