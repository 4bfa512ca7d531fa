"""
Core grid module.

Exports:
- Grid, CollisionGrid: bounded origin-offset 2D integer grids
- collision_table: table-driven tile ID to collision ID transform
- GridError, GridBoundsError, GridShapeError, GridValueError, MalformedMapError: errors
- LoaderConfig, configure_logging: configuration
- JSONSource, FileJSONSource: raw map JSON sources
"""

from tilegrid.grid import Grid, CollisionGrid, collision_table
from tilegrid.errors import (
    GridError,
    GridBoundsError,
    GridShapeError,
    GridValueError,
    MalformedMapError,
)
from tilegrid.config import LoaderConfig, configure_logging
from tilegrid.resources import JSONSource, FileJSONSource

__all__ = [
    # Grids
    "Grid",
    "CollisionGrid",
    "collision_table",
    # Errors
    "GridError",
    "GridBoundsError",
    "GridShapeError",
    "GridValueError",
    "MalformedMapError",
    # Config
    "LoaderConfig",
    "configure_logging",
    # Sources
    "JSONSource",
    "FileJSONSource",
]
