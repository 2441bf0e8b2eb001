"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgsprite import __version__
from svgsprite.dependencies import get_plugin
from svgsprite.engine.registry import get_registry
from svgsprite.models.responses import HealthResponse
from svgsprite.plugin import SpriteComponentPlugin

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(plugin: SpriteComponentPlugin = Depends(get_plugin)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
        cached_entries=len(plugin.cache),
    )
