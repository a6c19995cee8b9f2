"""Water margins for flat-earth maps: ice wall perimeter and polar centre.

Flat earth needs a 3 tile wide water perimeter and a 4 tile radius water
centre, so later generators keep important features away from where the
ice walls go.
"""

import structlog

from ..tile_map import Tile, TileMap

logger = structlog.get_logger()

# Steps from the anchor tile, anchor included as step 0
EDGE_WATER_DEPTH = 2
CENTER_WATER_DEPTH = 3


def is_center_tile(tile: Tile) -> bool:
    return tile.latitude == 0 and tile.longitude == 0


def is_edge_tile(tile: Tile) -> bool:
    return len(tile.neighbors) < 6


def generate_flat_earth_extra_water(tile_map: TileMap, water_terrain: str) -> int:
    """Force water around the map boundary and the centre tile.

    Only adjacency is read, so the pass is order independent and running
    it twice changes nothing.

    Args:
        tile_map: Map whose base terrains are overwritten.
        water_terrain: Terrain name to force.

    Returns:
        Number of distinct tiles forced to water.
    """
    forced = set()
    for tile in tile_map.values:
        if is_center_tile(tile):
            depth = CENTER_WATER_DEPTH
        elif is_edge_tile(tile):
            depth = EDGE_WATER_DEPTH
        else:
            continue

        for target in tile_map.tiles_in_distance(tile, depth):
            target.base_terrain = water_terrain
            forced.add(target.position)

    logger.debug("flat_earth_water_forced", tiles=len(forced))
    return len(forced)
