"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgsprite.engine.config import ComponentOptions, SpriteOptions


class Settings(BaseSettings):
    svgsprite_env: str = "development"
    svgsprite_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Only files under this directory are read when a request carries no content
    svg_root: str = "."

    # Transform options for the HTTP host
    remove_attrs: list[str] = ["width", "height"]
    component_type: str | None = None
    component_default_export: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def sprite_options(self) -> SpriteOptions:
        component = None
        if self.component_type:
            component = ComponentOptions(
                type=self.component_type,
                default_export=self.component_default_export,
            )
        return SpriteOptions(remove_attrs=list(self.remove_attrs), component=component)


settings = Settings()
