import sys
import asyncio
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from tilegrid import FileJSONSource, LoaderConfig, configure_logging
from tilemaps import MapManager


async def verify(names: list[str], config: LoaderConfig) -> None:
    logger = logging.getLogger("MapVerification")
    manager = MapManager(FileJSONSource.from_config(config), config)

    logger.info(f"Loading {len(names)} maps from {config.maps_root}...")
    await manager.load_maps(names)

    for position, world in manager.maps.items():
        for index, layer in world.layers.items():
            grid = layer.collisions()
            blocked = sum(1 for _, _, value in grid if value != 0)
            logger.info(
                f"[{position}] {world.name} layer {index}: "
                f"bounds {grid.bounds}, {blocked} blocked cells"
            )


def main():
    config = LoaderConfig.from_env()
    configure_logging(config.log_level)
    logger = logging.getLogger("MapVerification")

    names = sys.argv[1:]
    if not names:
        names = sorted(p.stem for p in (config.maps_root / "maps").glob("*.json"))

    try:
        asyncio.run(verify(names, config))
        logger.info("VERIFICATION SUCCESSFUL: All maps loaded.")
    except Exception as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
