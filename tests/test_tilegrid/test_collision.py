import pytest

from tilegrid.grid import Grid, CollisionGrid, collision_table
from tilegrid.errors import GridBoundsError


class SolidGrid(CollisionGrid):
    """Collapses every non-empty tile into collision class 1."""

    @staticmethod
    def map_to_collision(tile_id: int) -> int:
        return 1 if tile_id else 0


def test_default_mapping_is_identity():
    c = CollisionGrid(0, 0, 2, 2)
    c.set(1, 1, 42)
    assert c.get(1, 1) == CollisionGrid.map_to_collision(42) == 42


def test_subclass_mapping_applies_on_set():
    c = SolidGrid(0, 0, 2, 2)
    c.set(0, 0, 17)
    c.set(1, 0, 0)
    assert c.get(0, 0) == 1
    assert c.get(1, 0) == 0


def test_from_array_returns_collision_grid_and_maps_values():
    c = SolidGrid.from_array([0, 5, 9, 0], 0, 0, 2, 2)
    assert isinstance(c, SolidGrid)
    assert [c.get(x, y) for y in range(2) for x in range(2)] == [0, 1, 1, 0]


def test_from_array_chunks_map_values():
    chunks = [{"x": 1, "y": 1, "width": 1, "height": 1, "data": [3]}]
    c = SolidGrid.from_array(chunks, 0, 0, 2, 2)
    assert c.get(1, 1) == 1


def test_instance_transform_overrides_default():
    c = CollisionGrid(0, 0, 1, 1, transform=collision_table({5: 2}))
    c.set(0, 0, 5)
    c.set(1, 0, 6)
    assert c.get(0, 0) == 2
    assert c.get(1, 0) == 6


def test_collision_table_default():
    walls = collision_table({1: 1, 2: 1}, default=0)
    assert walls(1) == 1
    assert walls(2) == 1
    assert walls(99) == 0


def test_fill_routes_through_mapping():
    c = SolidGrid(0, 0, 1, 1)
    c.fill(7)
    assert all(v == 1 for _, _, v in c)


def test_is_blocked():
    c = CollisionGrid(-1, -1, 1, 1)
    c.set(-1, -1, 3)
    assert c.is_blocked(-1, -1)
    assert not c.is_blocked(0, 0)
    with pytest.raises(GridBoundsError):
        c.is_blocked(1, 1)


def test_collision_grid_is_a_grid():
    c = CollisionGrid()
    assert isinstance(c, Grid)
    assert c.bounds == (0, 0, 0, 0)
    assert "CollisionGrid" in repr(c)


def test_bounds_error_names_collision_grid():
    c = CollisionGrid(0, 0, 1, 1)
    with pytest.raises(GridBoundsError, match="CollisionGrid"):
        c.set(5, 5, 1)
