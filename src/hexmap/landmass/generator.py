"""Landmass orchestration: template dispatch, classification and overrides."""

from typing import Callable

import numpy as np
import structlog
from numpy.typing import NDArray

from ..config import MapParameters, MapShape, MapType
from ..exceptions import MissingTerrainTypeError
from ..terrain_types import (
    Ruleset,
    TerrainType,
    default_ruleset,
    get_initialization_terrain,
)
from ..tile_map import TileMap, build_tile_map
from . import templates
from .classification import (
    blend_elevation,
    create_land_mask,
    effective_water_threshold,
    spawn_land_or_water,
)
from .flat_earth import generate_flat_earth_extra_water
from .randomness import MapGenerationRandomness
from .stats import LandmassStats, compute_landmass_stats

logger = structlog.get_logger()


class GenerationContext:
    """Run-scoped state for one landmass generation call."""

    def __init__(
        self,
        land_terrain: str,
        water_terrain: str,
        water_threshold: float,
    ):
        self.land_terrain = land_terrain
        self.water_terrain = water_terrain
        self.water_threshold = water_threshold
        self.elevation_seed: float | None = None
        # Orientation choices drawn once per run (is_north, is_latitude, ...)
        self.orientation: dict[str, bool] = {}


class LandmassResult:
    """Result of landmass generation with intermediate data."""

    def __init__(
        self,
        map_type: MapType,
        water_threshold: float,
        stats: LandmassStats,
        land_only: bool = False,
        elevation_seed: float | None = None,
        elevation: NDArray[np.float64] | None = None,
        orientation: dict[str, bool] | None = None,
    ):
        self.map_type = map_type
        self.water_threshold = water_threshold
        self.stats = stats
        self.land_only = land_only
        self.elevation_seed = elevation_seed
        self.elevation = elevation
        self.orientation = orientation or {}


class LandmassGenerator:
    """Assigns land or water base terrain to every tile of a map.

    Terrain names are resolved from the ruleset once, at construction. A
    ruleset without water terrain switches the generator to all-land mode.
    """

    def __init__(self, ruleset: Ruleset, randomness: MapGenerationRandomness):
        """Resolve initialization terrains.

        Args:
            ruleset: Terrain catalog.
            randomness: Random and noise source for every run of this generator.

        Raises:
            MissingTerrainTypeError: If the ruleset has no Land terrain.
        """
        self.ruleset = ruleset
        self.randomness = randomness
        self.land_terrain = get_initialization_terrain(ruleset, TerrainType.LAND)
        try:
            self.water_terrain = get_initialization_terrain(ruleset, TerrainType.WATER)
        except MissingTerrainTypeError:
            logger.info("land_only_mode", land_terrain=self.land_terrain)
            self.water_terrain = self.land_terrain

    @property
    def land_only(self) -> bool:
        return self.water_terrain == self.land_terrain

    def generate_land(self, tile_map: TileMap) -> LandmassResult:
        """Classify every tile of the map as land or water.

        Args:
            tile_map: Map whose tile base terrains are overwritten.

        Returns:
            LandmassResult with the effective threshold and per-tile elevation.
        """
        params = tile_map.map_parameters
        tiles = tile_map.values

        if self.land_only:
            for tile in tiles:
                tile.base_terrain = self.land_terrain
            stats = compute_landmass_stats(
                tile_map, self.land_terrain, self.water_terrain
            )
            return LandmassResult(
                map_type=params.type,
                water_threshold=effective_water_threshold(
                    params.type, params.water_threshold
                ),
                stats=stats,
                land_only=True,
            )

        context = GenerationContext(
            land_terrain=self.land_terrain,
            water_terrain=self.water_terrain,
            water_threshold=effective_water_threshold(
                params.type, params.water_threshold
            ),
        )

        build = _LANDMASS_BUILDERS[params.type]
        elevation = build(self.randomness, tile_map, context)

        land_mask = create_land_mask(elevation, context.water_threshold)
        spawn_land_or_water(
            tiles, land_mask, context.land_terrain, context.water_terrain
        )

        if params.shape == MapShape.FLAT_EARTH:
            generate_flat_earth_extra_water(tile_map, context.water_terrain)

        stats = compute_landmass_stats(
            tile_map, context.land_terrain, context.water_terrain
        )
        logger.info(
            "landmass_generated",
            map_type=params.type.value,
            shape=params.shape.value,
            tiles=stats.total,
            land=stats.land,
            water=stats.water,
            land_fraction=round(stats.land_fraction, 3),
            water_threshold=context.water_threshold,
            **context.orientation,
        )

        return LandmassResult(
            map_type=params.type,
            water_threshold=context.water_threshold,
            stats=stats,
            elevation_seed=context.elevation_seed,
            elevation=elevation,
            orientation=context.orientation,
        )


# --- Per map type builders ---
# Each draws its orientation choices, then the elevation seed, then per-tile
# jitter in canonical tile order, and returns blended elevation per tile.


def _draw_elevation_seed(
    randomness: MapGenerationRandomness,
    context: GenerationContext,
) -> float:
    context.elevation_seed = float(randomness.next_int())
    return context.elevation_seed


def _base_noise(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    seed: float,
) -> NDArray[np.float64]:
    world_x, world_y = tile_map.world_positions()
    return randomness.get_perlin_noise(world_x, world_y, seed)


def _choose_is_latitude(
    randomness: MapGenerationRandomness,
    params: MapParameters,
) -> bool:
    """Split across the longer side of a rectangle, randomly otherwise."""
    size = params.map_size
    if params.shape.uses_radius:
        return randomness.next_double() > 0.5
    if size.height > size.width:
        return True
    if size.width > size.height:
        return False
    return randomness.next_double() > 0.5


def _create_perlin(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    return blend_elevation(MapType.DEFAULT, noise)


def _create_archipelago(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    seed = _draw_elevation_seed(randomness, context)
    world_x, world_y = tile_map.world_positions()
    noise = randomness.get_ridged_noise(
        world_x, world_y, seed, octaves=10, persistence=0.5, lacunarity=2.0, scale=15.0
    )
    return blend_elevation(MapType.ARCHIPELAGO, noise)


def _elliptic_elevation(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
    map_type: MapType,
    coverage: float,
) -> NDArray[np.float64]:
    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    # Two draws per tile: falloff jitter, then ellipse ratio jitter
    jitter = randomness.next_doubles((len(tile_map), 2))
    bias = templates.elliptic_continent(
        tile_map.latitudes(),
        tile_map.longitudes(),
        tile_map.max_latitude,
        tile_map.max_longitude,
        scale_jitter=jitter[:, 0],
        ratio_jitter=jitter[:, 1],
        coverage=coverage,
    )
    return blend_elevation(map_type, noise, bias)


def _create_pangaea(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    return _elliptic_elevation(randomness, tile_map, context, MapType.PANGAEA, 0.85)


def _create_inner_sea(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    return _elliptic_elevation(randomness, tile_map, context, MapType.INNER_SEA, 0.6)


def _create_continent_and_islands(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    params = tile_map.map_parameters
    is_north = randomness.next_double() < 0.5
    is_latitude = _choose_is_latitude(randomness, params)
    context.orientation = {"is_north": is_north, "is_latitude": is_latitude}

    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    bias = templates.continent_and_islands(
        tile_map.latitudes(),
        tile_map.longitudes(),
        tile_map.max_latitude,
        tile_map.max_longitude,
        jitter=randomness.next_doubles(len(tile_map)),
        is_north=is_north,
        is_latitude=is_latitude,
        world_wrap=params.world_wrap,
    )
    return blend_elevation(MapType.CONTINENT_AND_ISLANDS, noise, bias)


def _create_two_continents(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    params = tile_map.map_parameters
    is_latitude = _choose_is_latitude(randomness, params)
    context.orientation = {"is_latitude": is_latitude}

    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    bias = templates.two_continents(
        tile_map.latitudes(),
        tile_map.longitudes(),
        tile_map.max_latitude,
        tile_map.max_longitude,
        jitter=randomness.next_doubles(len(tile_map)),
        is_latitude=is_latitude,
        world_wrap=params.world_wrap,
    )
    return blend_elevation(MapType.TWO_CONTINENTS, noise, bias)


def _create_three_continents(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    params = tile_map.map_parameters
    flat_earth = params.shape == MapShape.FLAT_EARTH
    is_north = randomness.next_double() < 0.5
    # Only flat earth may turn the layout East/West instead of North/South
    is_east_west = flat_earth and randomness.next_double() > 0.5
    context.orientation = {"is_north": is_north, "is_east_west": is_east_west}

    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    bias = templates.three_continents(
        tile_map.latitudes(),
        tile_map.longitudes(),
        tile_map.max_latitude,
        tile_map.max_longitude,
        jitter=randomness.next_doubles(len(tile_map)),
        is_north=is_north,
        is_east_west=is_east_west,
        flat_earth=flat_earth,
        world_wrap=params.world_wrap,
    )
    return blend_elevation(MapType.THREE_CONTINENTS, noise, bias)


def _create_four_corners(
    randomness: MapGenerationRandomness,
    tile_map: TileMap,
    context: GenerationContext,
) -> NDArray[np.float64]:
    params = tile_map.map_parameters
    seed = _draw_elevation_seed(randomness, context)
    noise = _base_noise(randomness, tile_map, seed)
    bias = templates.four_corners(
        tile_map.latitudes(),
        tile_map.longitudes(),
        tile_map.max_latitude,
        tile_map.max_longitude,
        jitter=randomness.next_doubles(len(tile_map)),
        world_wrap=params.world_wrap,
    )
    return blend_elevation(MapType.FOUR_CORNERS, noise, bias)


LandmassBuilder = Callable[
    [MapGenerationRandomness, TileMap, GenerationContext], NDArray[np.float64]
]

_LANDMASS_BUILDERS: dict[MapType, LandmassBuilder] = {
    MapType.DEFAULT: _create_perlin,
    MapType.ARCHIPELAGO: _create_archipelago,
    MapType.PANGAEA: _create_pangaea,
    MapType.INNER_SEA: _create_inner_sea,
    MapType.CONTINENT_AND_ISLANDS: _create_continent_and_islands,
    MapType.TWO_CONTINENTS: _create_two_continents,
    MapType.THREE_CONTINENTS: _create_three_continents,
    MapType.FOUR_CORNERS: _create_four_corners,
}


def generate_land(
    tile_map: TileMap,
    ruleset: Ruleset | None = None,
    seed: int | None = None,
) -> LandmassResult:
    """Generate land and water on an existing map.

    Args:
        tile_map: Map to classify in place.
        ruleset: Terrain catalog (None = built-in ruleset).
        seed: Random seed (None = the map parameters' seed).

    Returns:
        LandmassResult for the run.
    """
    if seed is None:
        seed = tile_map.map_parameters.seed
    generator = LandmassGenerator(
        ruleset if ruleset is not None else default_ruleset(),
        MapGenerationRandomness(seed),
    )
    return generator.generate_land(tile_map)


def generate_world(
    map_parameters: MapParameters,
    ruleset: Ruleset | None = None,
) -> tuple[TileMap, LandmassResult]:
    """Build a tile map for the parameters and generate its landmass.

    Args:
        map_parameters: Shape, size, map type and seed.
        ruleset: Terrain catalog (None = built-in ruleset).

    Returns:
        Tuple of (TileMap, LandmassResult).
    """
    tile_map = build_tile_map(map_parameters)
    result = generate_land(tile_map, ruleset)
    return tile_map, result
