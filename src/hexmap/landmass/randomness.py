"""Random and noise source shared by one map generation run."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .noise import perlin_noise, ridged_noise

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31


class MapGenerationRandomness:
    """Seedable random source plus the noise samplers that consume its seeds.

    Every random draw of a generation run goes through one instance, so a
    fixed seed reproduces the run as long as draws happen in the same order.
    """

    def __init__(self, seed: int | None = None):
        self.seed_rng(seed)

    def seed_rng(self, seed: int | None = None) -> None:
        """Restart the random stream (None = fresh OS entropy)."""
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def next_double(self) -> float:
        """Uniform double in [0, 1)."""
        return float(self.rng.random())

    def next_doubles(self, shape: int | tuple[int, ...]) -> NDArray[np.float64]:
        """Uniform doubles in [0, 1), filled in row-major draw order."""
        return self.rng.random(shape)

    def next_int(self) -> int:
        """Uniform signed 32-bit integer."""
        return int(self.rng.integers(_INT32_MIN, _INT32_MAX))

    def get_perlin_noise(
        self,
        x: ArrayLike,
        y: ArrayLike,
        seed: float,
        octaves: int = 6,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
        scale: float = 10.0,
    ) -> NDArray[np.float64]:
        """Standard elevation noise at world-space coordinates, in [-1, 1]."""
        return perlin_noise(x, y, seed, octaves, persistence, lacunarity, scale)

    def get_ridged_noise(
        self,
        x: ArrayLike,
        y: ArrayLike,
        seed: float,
        octaves: int = 10,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
        scale: float = 15.0,
    ) -> NDArray[np.float64]:
        """Ridged noise at world-space coordinates, in [0, 1]."""
        return ridged_noise(x, y, seed, octaves, persistence, lacunarity, scale)
