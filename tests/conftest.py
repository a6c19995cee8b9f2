"""Shared test fixtures for hex map tests."""

from typing import Callable

import pytest

from hexmap.config import MapParameters, MapShape, MapSize, MapType
from hexmap.landmass.randomness import MapGenerationRandomness
from hexmap.terrain_types import Ruleset, Terrain, TerrainType, default_ruleset
from hexmap.tile_map import TileMap, build_tile_map


def make_params(
    map_type: MapType = MapType.DEFAULT,
    shape: MapShape = MapShape.HEXAGONAL,
    radius: int = 6,
    width: int = 16,
    height: int = 10,
    **kwargs,
) -> MapParameters:
    """MapParameters with a small custom size."""
    return MapParameters(
        type=map_type,
        shape=shape,
        map_size=MapSize(radius=radius, width=width, height=height),
        **kwargs,
    )


@pytest.fixture
def hex_map() -> TileMap:
    """Hexagonal map of radius 6 (127 tiles)."""
    return build_tile_map(make_params(radius=6))


@pytest.fixture
def rect_map() -> TileMap:
    """Rectangular 16x10 map without wrap."""
    return build_tile_map(make_params(shape=MapShape.RECTANGULAR))


@pytest.fixture
def wrapped_map() -> TileMap:
    """Rectangular 16x10 map with world wrap."""
    return build_tile_map(make_params(shape=MapShape.RECTANGULAR, world_wrap=True))


@pytest.fixture
def flat_earth_map() -> TileMap:
    """Flat-earth map of radius 8."""
    return build_tile_map(make_params(shape=MapShape.FLAT_EARTH, radius=8))


@pytest.fixture
def make_map() -> Callable[..., TileMap]:
    """Factory building an empty map from make_params arguments."""

    def _make(*args, **kwargs) -> TileMap:
        return build_tile_map(make_params(*args, **kwargs))

    return _make


@pytest.fixture
def randomness() -> MapGenerationRandomness:
    """Seeded random source."""
    return MapGenerationRandomness(seed=42)


@pytest.fixture
def ruleset() -> Ruleset:
    """Built-in ruleset (Ocean / Grassland)."""
    return default_ruleset()


@pytest.fixture
def land_only_ruleset() -> Ruleset:
    """Ruleset with no Water terrain."""
    return Ruleset.from_terrains(
        [
            Terrain(name="Grassland", type=TerrainType.LAND),
            Terrain(name="Hill", type=TerrainType.TERRAIN_FEATURE),
        ]
    )
