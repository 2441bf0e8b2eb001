"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0
    cached_entries: int = 0


class TransformResponse(BaseModel):
    code: str
    map: dict[str, Any] = Field(default_factory=dict)
    cached: bool = False
