"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Response wrapper used by every endpoint, successful or not."""

    success: bool = Field(..., description="False when the request failed")
    message: str | None = Field(None, description="Human-readable outcome")
    data: DataT | None = None


def ok(data: DataT, message: str | None = None) -> Envelope[DataT]:
    """Wrap ``data`` in a successful envelope."""
    return Envelope(success=True, message=message, data=data)
