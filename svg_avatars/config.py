"""Settings for the command-line entry point, read from environment variables.

The builder itself never reads these; its defaults are fixed.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from svg_avatars.rings import Rings


class Settings(BaseSettings):
    log_level: str = "info"

    # Example avatar
    identifier: str = "foo"
    rings: Rings = Rings.THREE
    stroke_color: str = "black"
    output: str = "foo.svg"

    model_config = SettingsConfigDict(
        env_prefix="SVG_AVATARS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("rings", mode="before")
    @classmethod
    def _parse_rings(cls, value: object) -> Rings:
        return Rings.parse(value)  # type: ignore[arg-type]
