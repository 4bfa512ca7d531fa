"""
Bounded 2D integer grids with a world-space origin.

A Grid covers the inclusive world rectangle
[origin_x, origin_x + width] x [origin_y, origin_y + height], so a grid
declared with width w and height h stores (h + 1) rows of (w + 1) cells.
Cells are kept in a numpy int64 array indexed [y - origin_y, x - origin_x],
so stored values must fit in a signed 64-bit integer.

Every write goes through the grid's value transform. A plain Grid uses
the identity; CollisionGrid uses map_to_collision so tile IDs can be
folded into collision classes without touching storage logic.

Usage:
    grid = CollisionGrid.from_array(layer["chunks"], 0, 0, 64, 64)
    if grid.is_blocked(12, 7):
        ...
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Integral
from typing import Any, Callable, Iterator, Sequence

import numpy as np

from tilegrid.errors import GridBoundsError, GridShapeError, GridValueError, MalformedMapError

Transform = Callable[[int], int]

# Cells are stored as int64
CELL_MIN = int(np.iinfo(np.int64).min)
CELL_MAX = int(np.iinfo(np.int64).max)

_CHUNK_KEYS = ("x", "y", "width", "data")


def is_integer(value: Any) -> bool:
    """True for ints and numpy integers, False for bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def _identity(value: int) -> int:
    return value


class Grid:
    """
    Fixed-size 2D array of integers with an arbitrary origin.

    The grid is sized once at construction, zero-filled, and never
    resized. get/set validate coordinates before touching storage, so a
    failed call leaves the grid unchanged.
    """

    def __init__(
        self,
        origin_x: int = 0,
        origin_y: int = 0,
        width: int = 0,
        height: int = 0,
        transform: Transform | None = None,
    ):
        if not all(is_integer(v) for v in (origin_x, origin_y, width, height)):
            raise TypeError('"origin_x", "origin_y", "width" and "height" must be integers')
        if width < 0 or height < 0:
            raise GridShapeError(
                f"{type(self).__name__} extents must be non-negative, got <{width}, {height}>"
            )

        self._origin_x = int(origin_x)
        self._origin_y = int(origin_y)
        self._width = int(width)
        self._height = int(height)
        self._transform: Transform = transform or self._default_transform()
        self._cells = np.zeros((self._height + 1, self._width + 1), dtype=np.int64)

    def _default_transform(self) -> Transform:
        return _identity

    # --- Geometry ---

    @property
    def origin_x(self) -> int:
        """World x of storage column 0."""
        return self._origin_x

    @property
    def origin_y(self) -> int:
        """World y of storage row 0."""
        return self._origin_y

    @property
    def width(self) -> int:
        """Inclusive width (storage has width + 1 columns)."""
        return self._width

    @property
    def height(self) -> int:
        """Inclusive height (storage has height + 1 rows)."""
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """Storage shape as (rows, columns)."""
        return self._cells.shape

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Inclusive world bounds (min_x, min_y, max_x, max_y)."""
        return (
            self._origin_x,
            self._origin_y,
            self._origin_x + self._width,
            self._origin_y + self._height,
        )

    @property
    def transform(self) -> Transform:
        """Value transform applied on every write."""
        return self._transform

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a world coordinate lies inside the grid."""
        return (
            self._origin_x <= x <= self._origin_x + self._width
            and self._origin_y <= y <= self._origin_y + self._height
        )

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, tuple) or len(position) != 2:
            return False
        x, y = position
        return is_integer(x) and is_integer(y) and self.in_bounds(x, y)

    # --- Access ---

    def _index(self, x: int, y: int) -> tuple[int, int]:
        if not self.in_bounds(x, y):
            raise GridBoundsError(
                x, y,
                x - self._origin_x, y - self._origin_y,
                self._width, self._height,
                kind=type(self).__name__,
            )
        return y - self._origin_y, x - self._origin_x

    def get(self, x: int, y: int) -> int:
        """Get the value at a world position."""
        if not is_integer(x) or not is_integer(y):
            raise TypeError('"x" and "y" must be integers')
        return int(self._cells[self._index(x, y)])

    def set(self, x: int, y: int, val: int) -> None:
        """Set the value at a world position, passing it through the transform."""
        if not is_integer(x) or not is_integer(y) or not is_integer(val):
            raise TypeError('"x", "y", and "val" must be integers')
        index = self._index(x, y)
        self._cells[index] = self._apply(val)

    def _apply(self, val: int) -> int:
        mapped = self._transform(val)
        if not is_integer(mapped):
            raise TypeError(
                f"transform returned {type(mapped).__name__} for {val}, expected an integer"
            )
        mapped = int(mapped)
        if not CELL_MIN <= mapped <= CELL_MAX:
            raise GridValueError(
                f"value {mapped} does not fit in a 64-bit cell [{CELL_MIN}, {CELL_MAX}]"
            )
        return mapped

    def fill(self, val: int) -> None:
        """Fill every cell with a value, passing it through the transform."""
        if not is_integer(val):
            raise TypeError('"val" must be an integer')
        self._cells.fill(self._apply(val))

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, value) in row-major world order."""
        for row, values in enumerate(self._cells):
            y = self._origin_y + row
            for col, value in enumerate(values):
                yield self._origin_x + col, y, int(value)

    def to_numpy(self) -> np.ndarray:
        """Read-only copy of the storage array, shape (height + 1, width + 1)."""
        cells = self._cells.copy()
        cells.flags.writeable = False
        return cells

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.bounds == other.bounds
            and np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(origin=({self._origin_x}, {self._origin_y}), "
            f"size=<{self._width}, {self._height}>)"
        )

    # --- Construction ---

    @classmethod
    def clone(cls, grid: Grid) -> Grid:
        """
        Create an independent copy of a grid.

        The copy has the same class, origin, extent and transform as the
        source. Storage is copied, so later writes to either grid are not
        seen by the other.
        """
        if not isinstance(grid, cls):
            raise TypeError(f'"grid" must be a {cls.__name__}')
        copy = type(grid)(
            grid._origin_x, grid._origin_y, grid._width, grid._height,
            transform=grid._transform,
        )
        copy._cells = grid._cells.copy()
        return copy

    @classmethod
    def from_array(
        cls,
        data: Sequence[Any],
        x: int,
        y: int,
        w: int,
        h: int,
        transform: Transform | None = None,
    ) -> Grid:
        """
        Build a grid of origin (x, y) and size <w, h> from Tiled layer data.

        Two shapes are accepted:
        - chunked: a list of {x, y, width, data} objects. Each chunk's flat
          data is decoded row-major and written at the chunk's own offset.
        - flat: a single list of values decoded row-major with w as the row
          width. Flat indices map to absolute coordinates (i % w, i // w);
          the grid origin is NOT added.

        A list whose first element is a mapping is treated as chunked.
        Every value is written through set(), so the transform applies.
        """
        if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
            raise TypeError('"data" must be a list')

        grid = cls(x, y, w, h, transform=transform)

        if data and isinstance(data[0], Mapping):
            for chunk in data:
                grid._write_chunk(chunk)
        else:
            grid._write_flat(data, w)

        return grid

    def _write_chunk(self, chunk: Any) -> None:
        if not isinstance(chunk, Mapping):
            raise MalformedMapError(f"expected a chunk object, got {type(chunk).__name__}")
        missing = [key for key in _CHUNK_KEYS if key not in chunk]
        if missing:
            raise MalformedMapError(f"chunk is missing {', '.join(missing)}")

        chunk_width = chunk["width"]
        if not is_integer(chunk_width) or chunk_width <= 0:
            raise MalformedMapError(f"chunk width must be a positive integer, got {chunk_width!r}")

        offset_x, offset_y = chunk["x"], chunk["y"]
        for i, val in enumerate(chunk["data"]):
            self.set(i % chunk_width + offset_x, i // chunk_width + offset_y, val)

    def _write_flat(self, data: Sequence[Any], row_width: int) -> None:
        if not data:
            return
        if row_width <= 0:
            raise MalformedMapError(f"flat data needs a positive row width, got {row_width}")

        for i, val in enumerate(data):
            self.set(i % row_width, i // row_width, val)


class CollisionGrid(Grid):
    """
    Grid of collision identifiers.

    Written values pass through map_to_collision, which is the identity
    unless overridden in a subclass or replaced per instance with the
    transform argument (see collision_table).
    """

    def _default_transform(self) -> Transform:
        return self.map_to_collision

    @staticmethod
    def map_to_collision(tile_id: int) -> int:
        """Map a tile ID to a collision ID."""
        return tile_id

    def is_blocked(self, x: int, y: int) -> bool:
        """Check if a position holds a non-zero collision ID."""
        return self.get(x, y) != 0


def collision_table(table: Mapping[int, int], default: int | None = None) -> Transform:
    """
    Build a transform that maps tile IDs through a lookup table.

    Tile IDs missing from the table map to default, or pass through
    unchanged when no default is given.

    Usage:
        # Water tiles 5-7 collapse into one collision class
        water = collision_table({5: 2, 6: 2, 7: 2})
        grid = CollisionGrid.from_array(data, 0, 0, 32, 32, transform=water)
    """
    lookup = dict(table)

    def map_tile(tile_id: int) -> int:
        if tile_id in lookup:
            return lookup[tile_id]
        return tile_id if default is None else default

    return map_tile
