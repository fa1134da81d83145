"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    xml: str = Field(..., description="Raw VectorDrawable XML")
    indent: int | None = Field(default=None, ge=0, description="Spaces per nesting level")
