import os
import sys
import asyncio
import pytest

# Ensure packages can be imported
sys.path.append(os.getcwd())


class RecordingSource:
    """
    In-memory JSON source that records fetch start/finish order.

    Each fetch yields to the event loop before returning so overlapping
    fetches are visible in the event log.
    """

    def __init__(self, documents: dict, delays: dict | None = None):
        self.documents = documents
        self.delays = delays or {}
        self.events: list[tuple[str, str]] = []

    async def fetch(self, path: str):
        self.events.append(("start", path))
        await asyncio.sleep(self.delays.get(path, 0))
        self.events.append(("end", path))
        if path not in self.documents:
            raise FileNotFoundError(path)
        return self.documents[path]


def collision_layer(index, data=None, chunks=None, width=1, height=1, **extra):
    """Raw Tiled layer dict named Collision:<index>."""
    layer = {"name": f"Collision:{index}", "width": width, "height": height, **extra}
    if data is not None:
        layer["data"] = data
    if chunks is not None:
        layer["chunks"] = chunks
    return layer


@pytest.fixture
def sample_maps():
    """Two small maps: one flat, one chunked with a decorative layer."""
    return {
        "/maps/a.json": {
            "layers": [
                collision_layer(0, data=[0, 1, 2, 3], width=2, height=2),
            ]
        },
        "/maps/b.json": {
            "layers": [
                {"name": "Ground", "data": "eJxjYBgFgwkAAAEAAQ==", "encoding": "base64"},
                collision_layer(
                    1,
                    chunks=[{"x": 5, "y": 5, "width": 2, "height": 2, "data": [9, 8, 7, 6]}],
                    width=10,
                    height=10,
                ),
            ]
        },
    }


@pytest.fixture
def source(sample_maps):
    """Fresh recording source over the sample maps."""
    return RecordingSource(sample_maps)


@pytest.fixture
def make_source():
    """Factory for RecordingSource over custom documents."""
    return RecordingSource


@pytest.fixture
def make_layer():
    """Factory for raw collision layer dicts."""
    return collision_layer
