"""Map generation parameters and TOML configuration loading."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from .terrain_types import Ruleset, Terrain, default_ruleset


class MapType(str, Enum):
    """Landmass template applied on top of the elevation noise."""

    DEFAULT = "default"
    PANGAEA = "pangaea"
    INNER_SEA = "innerSea"
    CONTINENT_AND_ISLANDS = "continentAndIslands"
    TWO_CONTINENTS = "twoContinents"
    THREE_CONTINENTS = "threeContinents"
    FOUR_CORNERS = "fourCorners"
    ARCHIPELAGO = "archipelago"


class MapShape(str, Enum):
    """Overall outline of the tile grid."""

    HEXAGONAL = "hexagonal"
    RECTANGULAR = "rectangular"
    FLAT_EARTH = "flatEarth"

    @property
    def uses_radius(self) -> bool:
        """Whether the shape is laid out by radius rather than width/height."""
        return self in (MapShape.HEXAGONAL, MapShape.FLAT_EARTH)


class MapSize(BaseModel, frozen=True):
    """Map dimensions: radius for hexagonal shapes, width/height for rectangles."""

    name: str = Field(default="Custom", description="Preset name or Custom")
    radius: int = Field(default=20, ge=0, description="Radius for hexagonal maps")
    width: int = Field(default=44, ge=1, description="Columns for rectangular maps")
    height: int = Field(default=29, ge=1, description="Rows for rectangular maps")

    @classmethod
    def from_preset(cls, name: str) -> "MapSize":
        """Look up a named size preset (case-insensitive).

        Raises:
            ValueError: If the preset name is unknown.
        """
        key = name.lower()
        if key not in MAP_SIZE_PRESETS:
            raise ValueError(
                f"Unknown map size '{name}'. "
                f"Available sizes: {sorted(MAP_SIZE_PRESETS)}"
            )
        return MAP_SIZE_PRESETS[key]


MAP_SIZE_PRESETS: dict[str, MapSize] = {
    "tiny": MapSize(name="Tiny", radius=10, width=23, height=15),
    "small": MapSize(name="Small", radius=15, width=33, height=21),
    "medium": MapSize(name="Medium", radius=20, width=44, height=29),
    "large": MapSize(name="Large", radius=30, width=66, height=43),
    "huge": MapSize(name="Huge", radius=40, width=87, height=57),
}


class MapParameters(BaseModel):
    """Parameters read by the landmass generator."""

    type: MapType = Field(default=MapType.DEFAULT, description="Landmass template")
    shape: MapShape = Field(default=MapShape.HEXAGONAL, description="Grid outline")
    map_size: MapSize = Field(
        default_factory=lambda: MAP_SIZE_PRESETS["medium"],
        description="Grid dimensions",
    )
    water_threshold: float = Field(
        default=0.0, description="Elevation below this becomes water"
    )
    world_wrap: bool = Field(
        default=False, description="Longitude wraps around the map edges"
    )
    seed: int | None = Field(
        default=None, description="Random seed (None = unseeded run)"
    )


class LandmassConfig(BaseModel):
    """Complete configuration for a landmass generation run."""

    map: MapParameters = Field(default_factory=MapParameters)
    terrains: list[Terrain] = Field(
        default_factory=list,
        description="Terrain catalog (empty = built-in ruleset)",
    )

    def ruleset(self) -> Ruleset:
        """Build the ruleset declared by this config."""
        if not self.terrains:
            return default_ruleset()
        return Ruleset.from_terrains(self.terrains)


def load_config(config_path: Path) -> LandmassConfig:
    """Load configuration from a TOML file.

    A ``size = "<preset>"`` key in the ``[map]`` table is expanded to the
    matching size preset.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed LandmassConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        ValueError: If a size preset is unknown.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    map_data = data.get("map", {})
    preset = map_data.pop("size", None)
    if preset is not None:
        map_data["map_size"] = MapSize.from_preset(preset).model_dump()

    return LandmassConfig.model_validate(data)


# Bundled configs ship inside the package so wheels carry them
BUNDLED_CONFIGS_DIR = Path(__file__).parent / "configs"


def list_configs() -> list[str]:
    """Names of the bundled configs."""
    return sorted(p.stem for p in BUNDLED_CONFIGS_DIR.glob("*.toml"))


def find_config(name: str) -> Path:
    """Resolve a config argument to a TOML file.

    ``name`` is either a path to an existing file or the name of a bundled
    config, with or without the ``.toml`` suffix.

    Raises:
        FileNotFoundError: If neither resolves to a file.
    """
    as_path = Path(name)
    if as_path.is_file():
        return as_path

    bundled = BUNDLED_CONFIGS_DIR / as_path.with_suffix(".toml").name
    if as_path.parent == Path(".") and bundled.is_file():
        return bundled

    raise FileNotFoundError(
        f"No config file or bundled config named '{name}' "
        f"(bundled: {', '.join(list_configs())})"
    )
