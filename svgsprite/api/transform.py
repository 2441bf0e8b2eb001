"""POST /api/transform — run one module through the sprite plugin."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svgsprite.dependencies import get_plugin
from svgsprite.models.requests import TransformRequest
from svgsprite.models.responses import TransformResponse
from svgsprite.plugin import SpriteComponentPlugin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/transform", response_model=TransformResponse)
async def transform(
    req: TransformRequest,
    plugin: SpriteComponentPlugin = Depends(get_plugin),
) -> TransformResponse:
    cached = req.path in plugin.cache
    try:
        result = await plugin.transform(req.source, req.path, content=req.content)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=f"Path outside the SVG root: {req.path}") from e
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"SVG not found: {req.path}") from e
    except OSError as e:
        logger.warning("Reading %s failed: %s", req.path, e)
        raise HTTPException(status_code=500, detail=f"Could not read {req.path}") from e

    return TransformResponse(code=result.code, map=dict(result.map), cached=cached)
