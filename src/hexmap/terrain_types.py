"""Terrain catalog: terrain types, ruleset lookup and the built-in ruleset."""

from enum import Enum

from pydantic import BaseModel, Field

from .exceptions import MissingTerrainTypeError


class TerrainType(str, Enum):
    """Broad terrain categories a ruleset entry belongs to."""

    LAND = "Land"
    WATER = "Water"
    TERRAIN_FEATURE = "TerrainFeature"
    NATURAL_WONDER = "NaturalWonder"


class Terrain(BaseModel, frozen=True):
    """Single terrain catalog entry."""

    name: str
    type: TerrainType


class Ruleset(BaseModel):
    """Terrain catalog keyed by terrain name, in declaration order."""

    terrains: dict[str, Terrain] = Field(default_factory=dict)

    @classmethod
    def from_terrains(cls, terrains: list[Terrain]) -> "Ruleset":
        return cls(terrains={terrain.name: terrain for terrain in terrains})

    def terrains_of_type(self, terrain_type: TerrainType) -> list[Terrain]:
        return [t for t in self.terrains.values() if t.type == terrain_type]


def get_initialization_terrain(ruleset: Ruleset, terrain_type: TerrainType) -> str:
    """Return the name of the first terrain of the given type.

    Raises:
        MissingTerrainTypeError: If the ruleset has no terrain of that type.
    """
    for terrain in ruleset.terrains.values():
        if terrain.type == terrain_type:
            return terrain.name
    raise MissingTerrainTypeError(terrain_type.value)


# Declaration order matters: the first Land and Water entries seed the map
_DEFAULT_TERRAINS: tuple[tuple[str, TerrainType], ...] = (
    ("Ocean", TerrainType.WATER),
    ("Coast", TerrainType.WATER),
    ("Grassland", TerrainType.LAND),
    ("Plains", TerrainType.LAND),
    ("Tundra", TerrainType.LAND),
    ("Desert", TerrainType.LAND),
    ("Lakes", TerrainType.WATER),
    ("Mountain", TerrainType.LAND),
    ("Snow", TerrainType.LAND),
    ("Hill", TerrainType.TERRAIN_FEATURE),
    ("Forest", TerrainType.TERRAIN_FEATURE),
    ("Jungle", TerrainType.TERRAIN_FEATURE),
    ("Marsh", TerrainType.TERRAIN_FEATURE),
    ("Ice", TerrainType.TERRAIN_FEATURE),
    ("Mount Fuji", TerrainType.NATURAL_WONDER),
)


def default_ruleset() -> Ruleset:
    """Built-in ruleset with ocean/grassland as initialization terrains."""
    return Ruleset.from_terrains(
        [Terrain(name=name, type=kind) for name, kind in _DEFAULT_TERRAINS]
    )
