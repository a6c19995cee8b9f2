"""Core hex coordinate types."""

import math

from pydantic import BaseModel

# Axial neighbour offsets, clockwise starting from the upper right
# Coordinate system: latitude = x + y, longitude = x - y
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
)

_SQRT3 = math.sqrt(3.0)


class HexCoord(BaseModel, frozen=True):
    """Immutable axial hex coordinate."""

    x: int
    y: int

    @classmethod
    def from_lat_long(cls, latitude: int, longitude: int) -> "HexCoord":
        """Build a coordinate from its geographic projection.

        Raises:
            ValueError: If latitude and longitude have different parity.
        """
        if (latitude - longitude) % 2 != 0:
            raise ValueError(
                f"Latitude {latitude} and longitude {longitude} must share parity"
            )
        return cls(x=(latitude + longitude) // 2, y=(latitude - longitude) // 2)

    @property
    def latitude(self) -> int:
        return self.x + self.y

    @property
    def longitude(self) -> int:
        return self.x - self.y

    @property
    def world_position(self) -> tuple[float, float]:
        """Centre of the hex in world space, neighbouring centres sqrt(3) apart."""
        return 1.5 * (self.y - self.x), _SQRT3 / 2 * (self.x + self.y)

    def neighbors(self) -> list["HexCoord"]:
        """Return the six adjacent coordinates (unbounded)."""
        return [HexCoord(x=self.x + dx, y=self.y + dy) for dx, dy in NEIGHBOR_OFFSETS]

    def distance_to(self, other: "HexCoord") -> int:
        """Hex step distance between two coordinates."""
        dx = self.x - other.x
        dy = self.y - other.y
        if dx * dy > 0:
            return max(abs(dx), abs(dy))
        return abs(dx) + abs(dy)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"HexCoord(x={self.x}, y={self.y})"
