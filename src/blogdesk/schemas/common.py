"""Shared Pydantic schemas for the response envelope."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping every successful API payload."""

    success: bool = Field(True, description="Always true for successful calls")
    message: str = Field(..., description="Human-readable summary of the outcome")
    data: DataT | None = Field(None, description="Operation payload")


class ErrorResponse(BaseModel):
    """Envelope returned for failed API calls."""

    success: bool = Field(False, description="Always false for failed calls")
    message: str = Field(..., description="Short description of what failed")
    error: str | None = Field(None, description="Underlying reason, surfaced verbatim")
