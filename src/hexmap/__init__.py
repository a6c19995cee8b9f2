"""Hex map core: coordinates, tile grid, terrain catalog and parameters."""

from .config import (
    MAP_SIZE_PRESETS,
    LandmassConfig,
    MapParameters,
    MapShape,
    MapSize,
    MapType,
    find_config,
    list_configs,
    load_config,
)
from .exceptions import HexMapError, MissingTerrainTypeError, TileNotFoundError
from .terrain_types import (
    Ruleset,
    Terrain,
    TerrainType,
    default_ruleset,
    get_initialization_terrain,
)
from .tile_map import Tile, TileMap, build_tile_map
from .types import NEIGHBOR_OFFSETS, HexCoord

__all__ = [
    # Types
    "HexCoord",
    "NEIGHBOR_OFFSETS",
    # Tile map
    "Tile",
    "TileMap",
    "build_tile_map",
    # Terrain
    "Terrain",
    "TerrainType",
    "Ruleset",
    "default_ruleset",
    "get_initialization_terrain",
    # Config
    "MapType",
    "MapShape",
    "MapSize",
    "MAP_SIZE_PRESETS",
    "MapParameters",
    "LandmassConfig",
    "load_config",
    "find_config",
    "list_configs",
    # Exceptions
    "HexMapError",
    "MissingTerrainTypeError",
    "TileNotFoundError",
]
