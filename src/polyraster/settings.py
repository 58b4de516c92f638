"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from polyraster.core.geometry import Color, parse_color


class DisplaySettings(BaseModel):
    """Window and framebuffer settings."""

    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)
    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=1, ge=1)
    title: str = "Polygons"


class RenderSettings(BaseModel):
    """Rasterization and export settings."""

    # Env values reach the validator undecoded: "#RRGGBB" or "[r, g, b]"
    fill_color: Annotated[Color, NoDecode] = (255, 0, 0)
    outline_color: Annotated[Color, NoDecode] = (255, 255, 255)
    background: Annotated[Color, NoDecode] = (0, 0, 0)
    min_outline_vertices: int = Field(default=4, ge=2)

    # Export
    export_path: Optional[Path] = Path("polygons.png")
    export_once: bool = True

    # Optional JSON scene; default polygons are used when unset
    scene_file: Optional[Path] = None

    @field_validator("fill_color", "outline_color", "background", mode="before")
    @classmethod
    def _check_color(cls, value):
        if isinstance(value, str) and value.lstrip().startswith("["):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                raise ValueError(f"Invalid color list: {value!r}") from None
        return parse_color(value)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="POLYRASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["window", "headless"] = "window"
    debug: bool = False

    # Headless mode
    headless_frames: int = Field(default=1, ge=1)

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @property
    def is_headless(self) -> bool:
        """Check if running without a window."""
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
