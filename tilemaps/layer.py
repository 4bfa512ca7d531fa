"""
Map layers.

A Layer pairs a stacking index with the collision grid loaded for it.
"""

from __future__ import annotations

from tilegrid.grid import CollisionGrid, is_integer


class Layer:
    """A single collision layer of a world, identified by its index."""

    def __init__(self, layer: int):
        if not is_integer(layer):
            raise TypeError('"layer" must be an integer')
        if layer < 0:
            raise ValueError(f'"layer" must be non-negative, got {layer}')
        self._layer = int(layer)
        self._collisions = CollisionGrid()

    @property
    def layer(self) -> int:
        """Stacking index of the layer."""
        return self._layer

    def set_collisions(self, grid: CollisionGrid) -> None:
        """Replace the layer's collision grid. Nothing is merged."""
        if not isinstance(grid, CollisionGrid):
            raise TypeError('"grid" must be an instance of CollisionGrid')
        self._collisions = grid

    def collisions(self) -> CollisionGrid:
        """The current collision grid (shared, not copied)."""
        return self._collisions

    def __repr__(self) -> str:
        return f"Layer({self._layer}, {self._collisions!r})"
