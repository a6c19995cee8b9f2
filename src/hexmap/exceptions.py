"""Custom exceptions for hex map generation."""


class HexMapError(Exception):
    """Base exception for hex map errors."""

    pass


class MissingTerrainTypeError(HexMapError):
    """Raised when the ruleset has no terrain of a required type."""

    def __init__(self, terrain_type: str):
        self.terrain_type = terrain_type
        super().__init__(f"Cannot create map - no {terrain_type} terrains found!")


class TileNotFoundError(HexMapError):
    """Raised when a coordinate is not part of the map."""

    pass
