import pytest

from tilegrid.grid import Grid, CollisionGrid
from tilemaps.layer import Layer


def test_layer_creation():
    layer = Layer(3)
    assert layer.layer == 3
    assert isinstance(layer.collisions(), CollisionGrid)
    assert layer.collisions().bounds == (0, 0, 0, 0)


@pytest.mark.parametrize("index", [1.0, "1", None, True])
def test_layer_index_must_be_integer(index):
    with pytest.raises(TypeError):
        Layer(index)


def test_layer_index_non_negative():
    with pytest.raises(ValueError):
        Layer(-1)


def test_set_collisions_replaces():
    layer = Layer(0)
    first = CollisionGrid.from_array([1, 1, 1, 1], 0, 0, 2, 2)
    second = CollisionGrid(0, 0, 1, 1)
    second.set(1, 1, 5)

    layer.set_collisions(first)
    layer.set_collisions(second)

    grid = layer.collisions()
    assert grid is second
    assert grid.get(0, 0) == 0  # not merged with first
    assert grid.get(1, 1) == 5


def test_set_collisions_type_check():
    layer = Layer(0)
    with pytest.raises(TypeError):
        layer.set_collisions(Grid(0, 0, 1, 1))
    with pytest.raises(TypeError):
        layer.set_collisions([[0]])


def test_collisions_shared_reference():
    layer = Layer(0)
    grid = CollisionGrid(0, 0, 1, 1)
    layer.set_collisions(grid)
    layer.collisions().set(0, 0, 2)
    assert grid.get(0, 0) == 2
