"""
JSON sources for raw map documents.

The loader only needs something with an async fetch(path) method;
FileJSONSource serves a directory on disk.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from tilegrid.config import LoaderConfig
from tilegrid.errors import MalformedMapError

logger = logging.getLogger(__name__)


@runtime_checkable
class JSONSource(Protocol):
    """Anything that can fetch a JSON document by path."""

    async def fetch(self, path: str) -> Any:
        ...


class FileJSONSource:
    """
    Serves JSON files below a root directory.

    Request paths are resolved relative to the root ("/maps/town.json"
    reads <root>/maps/town.json). Reads run in a worker thread so a slow
    disk does not block the event loop.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    @classmethod
    def from_config(cls, config: LoaderConfig) -> FileJSONSource:
        return cls(config.maps_root)

    def resolve(self, path: str) -> Path:
        """Map a request path to a file below the root."""
        root = self.root.resolve()
        file_path = (root / path.lstrip("/")).resolve()
        if not file_path.is_relative_to(root):
            raise ValueError(f"Path escapes source root: {path}")
        return file_path

    async def fetch(self, path: str) -> Any:
        file_path = self.resolve(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Map file not found: {file_path}")

        logger.debug(f"Reading {file_path}")
        return await asyncio.to_thread(self._read, file_path, path)

    @staticmethod
    def _read(file_path: Path, path: str) -> Any:
        with open(file_path, 'r', encoding='utf-8') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise MalformedMapError(f"invalid JSON: {e}", path) from e
