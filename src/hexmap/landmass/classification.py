"""Elevation blending and land/water classification."""

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import MapType
from ..terrain_types import TerrainType
from ..tile_map import Tile

# Archipelago maps carry more water
ARCHIPELAGO_THRESHOLD_OFFSET = 0.25


def effective_water_threshold(map_type: MapType, water_threshold: float) -> float:
    """Water threshold actually applied for a map type."""
    if map_type == MapType.ARCHIPELAGO:
        return water_threshold + ARCHIPELAGO_THRESHOLD_OFFSET
    return water_threshold


def blend_elevation(
    map_type: MapType,
    noise: ArrayLike,
    bias: ArrayLike | None = None,
) -> NDArray[np.float64]:
    """Combine raw noise with a template bias.

    Args:
        map_type: Map type selecting the blend ratio.
        noise: Raw noise elevation per tile.
        bias: Template bias per tile (ignored for template-free types).

    Returns:
        Blended elevation per tile.
    """
    noise = np.asarray(noise, dtype=np.float64)
    if map_type in (MapType.DEFAULT, MapType.ARCHIPELAGO) or bias is None:
        return noise

    bias = np.asarray(bias, dtype=np.float64)
    if map_type == MapType.PANGAEA:
        return noise * 0.75 + bias * 0.25
    if map_type == MapType.INNER_SEA:
        # Inverted bias carves the sea out of the centre
        return noise - bias * 0.3
    return (noise + bias) / 2.0


def classify(elevation: float, water_threshold: float) -> TerrainType:
    """Classify a single elevation value."""
    if elevation < water_threshold:
        return TerrainType.WATER
    return TerrainType.LAND


def create_land_mask(
    elevation: ArrayLike,
    water_threshold: float,
) -> NDArray[np.bool_]:
    """Create binary land mask from elevation.

    Args:
        elevation: Elevation per tile.
        water_threshold: Values below this are water.

    Returns:
        Boolean mask where True = land.
    """
    classify_all = np.vectorize(classify, otypes=[object])
    classes = classify_all(np.asarray(elevation, dtype=np.float64), water_threshold)
    return np.asarray(classes == TerrainType.LAND, dtype=bool)


def spawn_land_or_water(
    tiles: Sequence[Tile],
    land_mask: NDArray[np.bool_],
    land_terrain: str,
    water_terrain: str,
) -> None:
    """Assign base terrain to tiles from a land mask in the same order."""
    if len(tiles) != len(land_mask):
        raise ValueError(
            f"Land mask length {len(land_mask)} doesn't match {len(tiles)} tiles"
        )
    for tile, is_land in zip(tiles, land_mask):
        tile.base_terrain = land_terrain if is_land else water_terrain
