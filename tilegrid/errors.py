"""
Error types raised by grids and map loading.

Type violations (non-integer coordinates, wrong collaborator types) are
plain TypeError and are not redefined here.
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for grid errors."""


class GridBoundsError(GridError, IndexError):
    """A coordinate lies outside the declared extent of a grid."""

    def __init__(
        self,
        x: int,
        y: int,
        local_x: int,
        local_y: int,
        width: int,
        height: int,
        kind: str = "Grid",
    ):
        self.x = x
        self.y = y
        self.local_x = local_x
        self.local_y = local_y
        super().__init__(
            f"Position ({x}, {y}) - internally ({local_x}, {local_y}) - "
            f"out of bounds for {kind} of size <{width}, {height}>"
        )


class GridShapeError(GridError, ValueError):
    """A grid was declared with a negative width or height."""


class MalformedMapError(ValueError):
    """Raw map JSON does not have the shape the loader expects."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class GridValueError(GridError, ValueError):
    """A value does not fit in a grid cell."""
