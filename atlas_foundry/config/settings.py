from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AtlasSettings(BaseSettings):
    """Configuration for the content foundry.

    Resolution order: programmatic, environment vars, .env files, defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ATLAS_", env_file=".env", extra="ignore"
    )

    content_root: Path = Field(
        default=Path("content"),
        description="Directory scanned for system/body/mission documents",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: Literal["simple", "detailed"] = Field(
        default="simple", description="simple | detailed"
    )


@lru_cache
def get_settings() -> AtlasSettings:
    """Return the process-wide settings instance."""
    return AtlasSettings()
