"""
Loader configuration.

Settings are validated with pydantic so a bad path template or prefix
fails when the config is built rather than halfway through a load.

Usage:
    config = LoaderConfig(maps_root="assets", concurrent_loads=True)
    manager = MapManager(FileJSONSource.from_config(config), config)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "TILEGRID_"


class LoaderConfig(BaseModel):
    """Configuration for map loading."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    # Root directory served by FileJSONSource; maps live in <root>/maps
    maps_root: Path = Path("game/data")
    # Path requested from the JSON source for a map name
    path_template: str = "/maps/{name}.json"
    # Layer name marker; the remainder of the name is the layer index
    collision_prefix: str = "Collision:"
    # Fetch all maps at once instead of one after another
    concurrent_loads: bool = False
    # Check raw map JSON against the map schema before decoding
    validate_schema: bool = True
    log_level: str = "INFO"

    @field_validator("path_template")
    @classmethod
    def _template_has_name(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError('path_template must contain "{name}"')
        return value

    @field_validator("collision_prefix")
    @classmethod
    def _prefix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("collision_prefix must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    def map_path(self, name: str) -> str:
        """Path requested from the JSON source for a map."""
        return self.path_template.format(name=name)

    @classmethod
    def from_env(cls) -> LoaderConfig:
        """Build a config from TILEGRID_* environment variables."""
        fields = {
            "maps_root": "MAPS_ROOT",
            "path_template": "PATH_TEMPLATE",
            "collision_prefix": "COLLISION_PREFIX",
            "concurrent_loads": "CONCURRENT_LOADS",
            "validate_schema": "VALIDATE_SCHEMA",
            "log_level": "LOG_LEVEL",
        }
        values = {}
        for field, suffix in fields.items():
            value = os.getenv(ENV_PREFIX + suffix)
            if value is not None:
                values[field] = value
        return cls(**values)


def configure_logging(level: str | int = "INFO") -> None:
    """Set up root logging for scripts and tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
