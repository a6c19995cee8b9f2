"""Land/water summary of a generated map."""

from pydantic import BaseModel

from ..tile_map import TileMap


class LandmassStats(BaseModel, frozen=True):
    """Tile counts after landmass generation."""

    total: int
    land: int
    water: int

    @property
    def land_fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.land / self.total

    @property
    def unassigned(self) -> int:
        """Tiles that are neither land nor water."""
        return self.total - self.land - self.water


def compute_landmass_stats(
    tile_map: TileMap,
    land_terrain: str,
    water_terrain: str,
) -> LandmassStats:
    """Count land and water tiles.

    In all-land mode the two terrain names coincide and every tile counts
    as land.
    """
    land = 0
    water = 0
    for tile in tile_map.values:
        if tile.base_terrain == land_terrain:
            land += 1
        elif tile.base_terrain == water_terrain:
            water += 1
    return LandmassStats(total=len(tile_map), land=land, water=water)
