"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from vd2svg import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


class ConvertResponse(BaseModel):
    svg: str
    element_count: int = 0
    gradient_count: int = 0
    clip_path_count: int = 0
