"""Hex tile grid: tiles, adjacency and map shape construction."""

from collections import deque
from typing import Iterable, Iterator

import numpy as np
import structlog
from numpy.typing import NDArray

from .config import MapParameters, MapShape
from .exceptions import TileNotFoundError
from .types import HexCoord

logger = structlog.get_logger()


class Tile:
    """A single map tile.

    Geometry is fixed at construction; only ``base_terrain`` is mutated by
    the generators.
    """

    __slots__ = ("position", "base_terrain", "_neighbors")

    def __init__(self, position: HexCoord, base_terrain: str | None = None):
        self.position = position
        self.base_terrain = base_terrain
        self._neighbors: list["Tile"] = []

    @property
    def latitude(self) -> int:
        return self.position.latitude

    @property
    def longitude(self) -> int:
        return self.position.longitude

    @property
    def world_position(self) -> tuple[float, float]:
        return self.position.world_position

    @property
    def neighbors(self) -> tuple["Tile", ...]:
        """Adjacent tiles on the map (fewer than 6 at the map boundary)."""
        return tuple(self._neighbors)

    def __repr__(self) -> str:
        return f"Tile(position={self.position!r}, base_terrain={self.base_terrain!r})"


class TileMap:
    """Collection of tiles with adjacency and geographic extents.

    Tiles are iterated in a fixed canonical order (by latitude, then
    longitude) so that every consumer drawing randomness per tile stays
    reproducible.
    """

    def __init__(
        self,
        map_parameters: MapParameters,
        positions: Iterable[HexCoord],
        wrap_longitude: int | None = None,
    ):
        """Build the map and its adjacency.

        Args:
            map_parameters: Parameters this map was built from.
            positions: Coordinates of every tile.
            wrap_longitude: Longitude period for world-wrap neighbour folding
                (None = no folding).
        """
        self.map_parameters = map_parameters
        self.wrap_longitude = wrap_longitude

        ordered = sorted(set(positions), key=lambda p: (p.latitude, p.longitude))
        self._tiles: dict[HexCoord, Tile] = {p: Tile(p) for p in ordered}
        self._values: list[Tile] = list(self._tiles.values())

        for tile in self._values:
            tile._neighbors = self._find_neighbors(tile.position)

        self.max_latitude = max((abs(t.latitude) for t in self._values), default=0)
        self.max_longitude = max((abs(t.longitude) for t in self._values), default=0)

    def _find_neighbors(self, position: HexCoord) -> list[Tile]:
        neighbors = []
        for candidate in position.neighbors():
            tile = self.get_or_none(candidate)
            if tile is None and self.wrap_longitude is not None:
                tile = self._wrapped(candidate)
            if tile is None or tile.position == position or tile in neighbors:
                continue
            neighbors.append(tile)
        return neighbors

    def _wrapped(self, position: HexCoord) -> Tile | None:
        # Shifting longitude by the period keeps latitude fixed
        half = self.wrap_longitude // 2
        for shift in (half, -half):
            shifted = HexCoord(x=position.x + shift, y=position.y - shift)
            tile = self.get_or_none(shifted)
            if tile is not None:
                return tile
        return None

    # --- Lookup ---

    @property
    def values(self) -> list[Tile]:
        """All tiles in canonical order."""
        return self._values

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_or_none(self, position: HexCoord) -> Tile | None:
        return self._tiles.get(position)

    def get_tile(self, position: HexCoord) -> Tile:
        """Get tile at position.

        Raises:
            TileNotFoundError: If position is not on the map.
        """
        tile = self._tiles.get(position)
        if tile is None:
            raise TileNotFoundError(f"No tile at {position}")
        return tile

    def tiles_in_distance(self, origin: Tile, distance: int) -> list[Tile]:
        """Tiles reachable from origin in at most ``distance`` steps, origin first."""
        seen = {origin.position}
        found = [origin]
        frontier = deque([(origin, 0)])
        while frontier:
            tile, depth = frontier.popleft()
            if depth == distance:
                continue
            for neighbor in tile._neighbors:
                if neighbor.position not in seen:
                    seen.add(neighbor.position)
                    found.append(neighbor)
                    frontier.append((neighbor, depth + 1))
        return found

    # --- Bulk geometry in canonical order ---

    def latitudes(self) -> NDArray[np.float64]:
        return np.array([t.latitude for t in self._values], dtype=np.float64)

    def longitudes(self) -> NDArray[np.float64]:
        return np.array([t.longitude for t in self._values], dtype=np.float64)

    def world_positions(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """World-space x and y arrays."""
        coords = np.array([t.world_position for t in self._values], dtype=np.float64)
        coords = coords.reshape(-1, 2)
        return coords[:, 0], coords[:, 1]

    def terrain_counts(self) -> dict[str | None, int]:
        """Count tiles per base terrain."""
        counts: dict[str | None, int] = {}
        for tile in self._values:
            counts[tile.base_terrain] = counts.get(tile.base_terrain, 0) + 1
        return counts


def hexagonal_positions(radius: int) -> list[HexCoord]:
    """All coordinates within ``radius`` steps of the origin."""
    origin = HexCoord(x=0, y=0)
    return [
        HexCoord(x=x, y=y)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
        if origin.distance_to(HexCoord(x=x, y=y)) <= radius
    ]


def rectangular_positions(width: int, height: int) -> list[HexCoord]:
    """Columns by longitude, rows by latitude, centred on the origin."""
    positions = []
    for column in range(-(width // 2), (width - 1) // 2 + 1):
        for row in range(-(height // 2), (height - 1) // 2 + 1):
            latitude = 2 * row + (column & 1)
            positions.append(HexCoord.from_lat_long(latitude, column))
    return positions


def build_tile_map(map_parameters: MapParameters) -> TileMap:
    """Build an empty tile map for the given shape and size.

    Hexagonal and flat-earth maps are laid out by radius. Rectangular maps
    are laid out by width and height; with world wrap the width is rounded
    up to an even number of columns so the seam tiles onto itself.
    """
    size = map_parameters.map_size
    wrap_longitude = None

    if map_parameters.shape.uses_radius:
        positions = hexagonal_positions(size.radius)
    else:
        width = size.width
        if map_parameters.world_wrap:
            if width % 2:
                logger.info("wrap_width_rounded", width=width, rounded=width + 1)
                width += 1
            wrap_longitude = width
        positions = rectangular_positions(width, size.height)

    tile_map = TileMap(map_parameters, positions, wrap_longitude=wrap_longitude)
    logger.debug(
        "tile_map_built",
        shape=map_parameters.shape.value,
        tiles=len(tile_map),
        max_latitude=tile_map.max_latitude,
        max_longitude=tile_map.max_longitude,
    )
    return tile_map
