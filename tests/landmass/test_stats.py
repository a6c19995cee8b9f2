"""Tests for landmass statistics."""

from hexmap.landmass.stats import LandmassStats, compute_landmass_stats
from hexmap.tile_map import TileMap


class TestLandmassStats:
    """Tests for LandmassStats."""

    def test_fractions(self) -> None:
        """Land fraction is land over total."""
        stats = LandmassStats(total=10, land=3, water=7)
        assert stats.land_fraction == 0.3
        assert stats.unassigned == 0

    def test_empty(self) -> None:
        """An empty map has zero land fraction."""
        assert LandmassStats(total=0, land=0, water=0).land_fraction == 0.0

    def test_compute(self, hex_map: TileMap) -> None:
        """Counts follow base terrains; other tiles are unassigned."""
        tiles = hex_map.values
        tiles[0].base_terrain = "Grassland"
        tiles[1].base_terrain = "Ocean"
        tiles[2].base_terrain = "Ocean"
        stats = compute_landmass_stats(hex_map, "Grassland", "Ocean")
        assert (stats.land, stats.water) == (1, 2)
        assert stats.unassigned == len(hex_map) - 3

    def test_land_only_counts_as_land(self, hex_map: TileMap) -> None:
        """With equal terrain names every tile counts as land."""
        for tile in hex_map:
            tile.base_terrain = "Grassland"
        stats = compute_landmass_stats(hex_map, "Grassland", "Grassland")
        assert stats.land == len(hex_map)
        assert stats.water == 0
