"""
Map module - worlds and their collision layers.

Provides:
- Collision layer extraction from Tiled JSON
- Per-index layers holding a CollisionGrid
- Sequential or concurrent loading of named maps
"""

from tilemaps.layer import Layer
from tilemaps.map import World, MapManager

__all__ = [
    "Layer",
    "World",
    "MapManager",
]
