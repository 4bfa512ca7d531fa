"""
Map loading - worlds, collision layers, the map manager.

Maps are Tiled JSON documents fetched through a JSONSource. Every layer
whose name contains the collision prefix ("Collision:2") becomes a
CollisionGrid on the Layer with that index. Other layers are ignored.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence

from tilegrid.config import LoaderConfig
from tilegrid.errors import MalformedMapError
from tilegrid.grid import CollisionGrid
from tilegrid.resources import JSONSource, validate_collision_layer, validate_map
from tilemaps.layer import Layer

logger = logging.getLogger(__name__)


class World:
    """
    A single map and its collision layers.

    Layers are created lazily as their indices are found during load().
    """

    def __init__(self, name: str, source: JSONSource, config: LoaderConfig | None = None):
        if not isinstance(source, JSONSource):
            raise TypeError('"source" must provide an async fetch(path) method')
        self.name = name
        self.config = config or LoaderConfig()
        self._source = source
        self._layers: dict[int, Layer] = {}
        self.loaded: bool = False

    @property
    def path(self) -> str:
        """Path this world is fetched from."""
        return self.config.map_path(self.name)

    @property
    def layers(self) -> dict[int, Layer]:
        """Layers by index, in index order."""
        return dict(sorted(self._layers.items()))

    def get_layer(self, index: int) -> Optional[Layer]:
        """Get a layer by index."""
        return self._layers.get(index)

    async def load(self) -> None:
        """Fetch the map and decode its collision layers."""
        raw = await self._source.fetch(self.path)
        self._parse(raw)
        self.loaded = True
        logger.info(f"Loaded map '{self.name}' with {len(self._layers)} collision layers")

    def _parse(self, raw: Any) -> None:
        # Layers are rebuilt from scratch and only replace the current set
        # once the whole document has decoded.
        path = self.path
        if self.config.validate_schema:
            validate_map(raw, path)
        elif not isinstance(raw, dict) or not isinstance(raw.get('layers'), list):
            raise MalformedMapError("map has no layer list", path)

        prefix = self.config.collision_prefix
        layers: dict[int, Layer] = {}

        for raw_layer in raw['layers']:
            if not isinstance(raw_layer, dict):
                raise MalformedMapError("layer entries must be objects", path)
            name = raw_layer.get('name', '')
            if prefix not in name:
                logger.debug(f"{path}: skipping layer '{name}'")
                continue

            index = self._parse_index(name, prefix)
            if self.config.validate_schema:
                validate_collision_layer(raw_layer, path)

            chunks = raw_layer.get('chunks')
            collisions = CollisionGrid.from_array(
                chunks if chunks is not None else raw_layer.get('data', []),
                raw_layer.get('startx') or 0,
                raw_layer.get('starty') or 0,
                raw_layer.get('width'),
                raw_layer.get('height'),
            )

            # ensure layer exists
            layer = layers.get(index)
            if layer is None:
                layer = Layer(index)
                layers[index] = layer
            else:
                logger.warning(f"{path}: layer '{name}' replaces earlier collisions for index {index}")
            layer.set_collisions(collisions)
            logger.debug(f"{path}: layer {index} -> {collisions!r}")

        self._layers = layers

    def _parse_index(self, name: str, prefix: str) -> int:
        suffix = name.split(prefix, 1)[1].strip()
        try:
            index = int(suffix)
        except ValueError:
            raise MalformedMapError(
                f"layer '{name}' has a non-integer index '{suffix}'", self.path
            ) from None
        if index < 0:
            raise MalformedMapError(f"layer '{name}' has a negative index", self.path)
        return index

    def __repr__(self) -> str:
        return f"World({self.name!r}, layers={sorted(self._layers)})"


class MapManager:
    """
    Loads and holds worlds.

    Worlds are stored by their position in the name list given to
    load_maps(). Loads run one after another unless the config enables
    concurrent loads, in which case fetches overlap but results still
    land in position order.
    """

    def __init__(self, source: JSONSource, config: LoaderConfig | None = None):
        if not isinstance(source, JSONSource):
            raise TypeError('"source" must provide an async fetch(path) method')
        self.source = source
        self.config = config or LoaderConfig()
        self._maps: dict[int, World] = {}

    @property
    def maps(self) -> dict[int, World]:
        """Loaded worlds by position."""
        return dict(self._maps)

    def get(self, position: int) -> Optional[World]:
        """Get a loaded world by position."""
        return self._maps.get(position)

    def find(self, name: str) -> Optional[World]:
        """Get the first loaded world with a name."""
        for position in sorted(self._maps):
            if self._maps[position].name == name:
                return self._maps[position]
        return None

    def __len__(self) -> int:
        return len(self._maps)

    async def load_maps(self, names: Sequence[str]) -> None:
        """
        Load a list of maps.

        A failing map raises immediately. In sequential mode, maps after
        it are not started and maps before it stay loaded. In concurrent
        mode the other loads are cancelled and nothing is stored.
        """
        if isinstance(names, str):
            raise TypeError('"names" must be a sequence of map names, not a string')
        names = list(names)

        if self.config.concurrent_loads:
            await self._load_concurrent(names)
            return

        for position, name in enumerate(names):
            world = World(name, self.source, self.config)
            try:
                await world.load()
            except Exception as e:
                logger.error(f"Failed to load map '{name}': {e}")
                raise
            self._maps[position] = world

    async def _load_concurrent(self, names: list[str]) -> None:
        worlds = [World(name, self.source, self.config) for name in names]
        try:
            async with asyncio.TaskGroup() as group:
                for world in worlds:
                    group.create_task(world.load())
        except ExceptionGroup as eg:
            # The group cancels the remaining loads; surface the first failure
            error = eg.exceptions[0]
            logger.error(f"Failed to load maps {names}: {error}")
            raise error from None
        for position, world in enumerate(worlds):
            self._maps[position] = world
