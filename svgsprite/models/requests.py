"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TransformRequest(BaseModel):
    path: str = Field(..., description="Module path as resolved by the build host")
    source: str = Field(default="", description="Module code the host produced for this path")
    content: str | None = Field(
        default=None,
        description="Raw SVG markup; read from `path` when omitted",
    )
