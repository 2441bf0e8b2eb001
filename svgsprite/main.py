"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgsprite import __version__
from svgsprite.config import settings
from svgsprite.engine.pipeline import register_stages

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgsprite_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svg-sprite-component",
        description="SVG files as lazily injected sprite symbols for build hosts",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules so the registry is populated before first request
    register_stages()

    from svgsprite.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
