"""Tests for tile map construction and adjacency."""

import numpy as np
import pytest

from hexmap.config import MapShape
from hexmap.exceptions import TileNotFoundError
from hexmap.tile_map import (
    TileMap,
    build_tile_map,
    hexagonal_positions,
    rectangular_positions,
)
from hexmap.types import HexCoord


class TestPositions:
    """Tests for shape layouts."""

    @pytest.mark.parametrize("radius,expected", [(0, 1), (1, 7), (2, 19), (6, 127)])
    def test_hexagonal_count(self, radius: int, expected: int) -> None:
        """A hexagon of radius r holds 1 + 3r(r+1) tiles."""
        assert len(hexagonal_positions(radius)) == expected

    def test_hexagonal_within_radius(self) -> None:
        """Every hexagonal position is within the radius."""
        origin = HexCoord(x=0, y=0)
        assert all(origin.distance_to(p) <= 4 for p in hexagonal_positions(4))

    def test_rectangular_count(self) -> None:
        """Rectangle holds width x height distinct tiles."""
        positions = rectangular_positions(7, 5)
        assert len(positions) == 35
        assert len(set(positions)) == 35

    def test_rectangular_columns(self) -> None:
        """Columns span longitudes centred on zero."""
        longitudes = {p.longitude for p in rectangular_positions(6, 3)}
        assert longitudes == {-3, -2, -1, 0, 1, 2}

    def test_rectangular_column_parity(self) -> None:
        """Odd columns sit half a row above even ones."""
        for p in rectangular_positions(6, 4):
            assert p.latitude % 2 == p.longitude % 2


class TestTileMap:
    """Tests for TileMap."""

    def test_hex_map_size(self, hex_map: TileMap) -> None:
        """Radius 6 hexagonal map has 127 tiles."""
        assert len(hex_map) == 127

    def test_canonical_order(self, rect_map: TileMap) -> None:
        """Tiles iterate sorted by latitude then longitude."""
        keys = [(t.latitude, t.longitude) for t in rect_map]
        assert keys == sorted(keys)

    def test_tiles_start_unassigned(self, hex_map: TileMap) -> None:
        """No base terrain before generation."""
        assert all(t.base_terrain is None for t in hex_map)

    def test_extents(self, hex_map: TileMap, rect_map: TileMap) -> None:
        """Max latitude/longitude are the largest absolute values."""
        assert hex_map.max_latitude == 12
        assert hex_map.max_longitude == 6
        assert rect_map.max_latitude == 10
        assert rect_map.max_longitude == 8

    def test_get_tile(self, hex_map: TileMap) -> None:
        """Lookup by coordinate returns the tile at that position."""
        tile = hex_map.get_tile(HexCoord(x=1, y=2))
        assert tile.position == HexCoord(x=1, y=2)

    def test_get_tile_off_map(self, hex_map: TileMap) -> None:
        """Lookup off the map raises TileNotFoundError."""
        with pytest.raises(TileNotFoundError):
            hex_map.get_tile(HexCoord(x=7, y=7))
        assert hex_map.get_or_none(HexCoord(x=7, y=7)) is None

    def test_neighbors_symmetric(self, hex_map: TileMap) -> None:
        """Adjacency is symmetric."""
        for tile in hex_map:
            for neighbor in tile.neighbors:
                assert tile in neighbor.neighbors

    def test_edge_tiles_have_fewer_neighbors(self, hex_map: TileMap) -> None:
        """Only the outer ring of a hexagon lacks neighbours."""
        edge = [t for t in hex_map if len(t.neighbors) < 6]
        assert len(edge) == 36
        origin = HexCoord(x=0, y=0)
        assert all(origin.distance_to(t.position) == 6 for t in edge)

    def test_geometry_arrays(self, rect_map: TileMap) -> None:
        """Bulk arrays follow canonical order."""
        latitudes = rect_map.latitudes()
        assert latitudes.shape == (len(rect_map),)
        assert list(latitudes) == [t.latitude for t in rect_map]
        world_x, world_y = rect_map.world_positions()
        np.testing.assert_allclose(world_x, -1.5 * rect_map.longitudes())
        np.testing.assert_allclose(world_y, np.sqrt(3) / 2 * latitudes)

    def test_terrain_counts(self, hex_map: TileMap) -> None:
        """Terrain counts group tiles by base terrain."""
        hex_map.values[0].base_terrain = "Ocean"
        counts = hex_map.terrain_counts()
        assert counts == {"Ocean": 1, None: 126}


class TestTilesInDistance:
    """Tests for breadth-first neighbourhood lookup."""

    def test_distance_zero(self, hex_map: TileMap) -> None:
        """Distance 0 returns only the origin."""
        origin = hex_map.get_tile(HexCoord(x=0, y=0))
        assert hex_map.tiles_in_distance(origin, 0) == [origin]

    def test_ring_counts(self, hex_map: TileMap) -> None:
        """Distance 2 from the centre covers 19 tiles, origin first."""
        origin = hex_map.get_tile(HexCoord(x=0, y=0))
        found = hex_map.tiles_in_distance(origin, 2)
        assert len(found) == 19
        assert found[0] is origin
        assert all(origin.position.distance_to(t.position) <= 2 for t in found)

    def test_clipped_at_boundary(self, hex_map: TileMap) -> None:
        """Neighbourhoods stop at the map boundary."""
        corner = hex_map.get_tile(HexCoord(x=6, y=6))
        found = hex_map.tiles_in_distance(corner, 1)
        assert len(found) == 4


class TestWorldWrap:
    """Tests for world-wrap adjacency on rectangular maps."""

    def test_rect_without_wrap_has_open_sides(self, rect_map: TileMap) -> None:
        """Without wrap, side columns have fewer than six neighbours."""
        west = [t for t in rect_map if t.longitude == -8]
        assert all(len(t.neighbors) < 6 for t in west)

    def test_wrap_joins_seam(self, wrapped_map: TileMap) -> None:
        """With wrap, the easternmost column touches the westernmost."""
        for tile in wrapped_map:
            if tile.longitude == 7:
                assert any(n.longitude == -8 for n in tile.neighbors)

    def test_wrap_keeps_latitude_adjacency(self, wrapped_map: TileMap) -> None:
        """Wrapped neighbours are one latitude step away."""
        for tile in wrapped_map:
            for neighbor in tile.neighbors:
                assert abs(neighbor.latitude - tile.latitude) <= 2

    def test_wrap_symmetric(self, wrapped_map: TileMap) -> None:
        """Wrapped adjacency is symmetric."""
        for tile in wrapped_map:
            for neighbor in tile.neighbors:
                assert tile in neighbor.neighbors

    def test_interior_rows_fully_connected(self, wrapped_map: TileMap) -> None:
        """Away from the poles every tile has six neighbours."""
        inner = [t for t in wrapped_map if abs(t.latitude) < 8]
        assert all(len(t.neighbors) == 6 for t in inner)

    def test_odd_width_rounded_up(self, make_map) -> None:
        """Odd width becomes even under world wrap."""
        tile_map = make_map(
            shape=MapShape.RECTANGULAR, width=15, height=10, world_wrap=True
        )
        assert len(tile_map) == 160
        assert tile_map.wrap_longitude == 16

    def test_hexagonal_ignores_wrap(self, make_map) -> None:
        """Radius shapes never fold neighbours."""
        tile_map = make_map(shape=MapShape.HEXAGONAL, radius=3, world_wrap=True)
        assert tile_map.wrap_longitude is None

    def test_build_uses_shape(self, make_map) -> None:
        """Flat earth is laid out like a hexagon."""
        tile_map = make_map(shape=MapShape.FLAT_EARTH, radius=2)
        assert len(tile_map) == 19


def test_build_tile_map_keeps_parameters(make_map) -> None:
    """The map remembers the parameters it was built from."""
    tile_map = make_map(radius=2, seed=5)
    assert tile_map.map_parameters.seed == 5
    assert isinstance(build_tile_map(tile_map.map_parameters), TileMap)
