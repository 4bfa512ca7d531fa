"""
Resource access for raw map data.

Exports:
- JSONSource: protocol the loader fetches through
- FileJSONSource: directory-backed source
- MAP_SCHEMA, COLLISION_LAYER_SCHEMA: raw map document schemas
- validate_map, validate_collision_layer: schema checks raising MalformedMapError
"""

from tilegrid.resources.source import JSONSource, FileJSONSource
from tilegrid.resources.schema import (
    MAP_SCHEMA,
    COLLISION_LAYER_SCHEMA,
    validate_map,
    validate_collision_layer,
)

__all__ = [
    "JSONSource",
    "FileJSONSource",
    "MAP_SCHEMA",
    "COLLISION_LAYER_SCHEMA",
    "validate_map",
    "validate_collision_layer",
]
