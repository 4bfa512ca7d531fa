"""
JSON schemas for raw map documents.

Only the parts the collision loader reads are constrained. Tiled writes
many more keys, which are allowed and ignored. Non-collision layers are
only required to have a name, since their data may use encodings the
loader never decodes.

Draft 4 is used because later drafts accept 10.0 as an "integer".
"""

from __future__ import annotations

from typing import Any

import jsonschema

from tilegrid.errors import MalformedMapError

MAP_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["layers"],
    "properties": {
        "layers": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {"name": {"type": "string"}},
            },
        },
    },
}

CHUNK_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["x", "y", "width", "data"],
    "properties": {
        "x": {"type": "integer"},
        "y": {"type": "integer"},
        "width": {"type": "integer", "minimum": 1},
        "height": {"type": "integer", "minimum": 0},
        "data": {"type": "array", "items": {"type": "integer"}},
    },
}

COLLISION_LAYER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["name", "width", "height"],
    "anyOf": [
        {"required": ["chunks"]},
        {"required": ["data"]},
    ],
    "properties": {
        "name": {"type": "string"},
        "chunks": {"type": "array", "items": CHUNK_SCHEMA},
        "data": {"type": "array", "items": {"type": "integer"}},
        "startx": {"type": "integer"},
        "starty": {"type": "integer"},
        "width": {"type": "integer", "minimum": 0},
        "height": {"type": "integer", "minimum": 0},
    },
}


def _validate(instance: Any, schema: dict[str, Any], path: str | None) -> None:
    try:
        jsonschema.validate(instance=instance, schema=schema, cls=jsonschema.Draft4Validator)
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise MalformedMapError(f"{location}: {e.message}", path) from e


def validate_map(raw: Any, path: str | None = None) -> None:
    """Raise MalformedMapError if a map document has no usable layer list."""
    _validate(raw, MAP_SCHEMA, path)


def validate_collision_layer(raw_layer: Any, path: str | None = None) -> None:
    """Raise MalformedMapError if a collision layer cannot be decoded."""
    _validate(raw_layer, COLLISION_LAYER_SCHEMA, path)
