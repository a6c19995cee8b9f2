"""Landmass generation package.

This package decides, for every tile of a hex map, whether it is land or
water: seeded noise blended with a per map type template, thresholded,
plus water margins on flat-earth maps.
"""

from .generator import (
    LandmassGenerator,
    LandmassResult,
    generate_land,
    generate_world,
)
from .randomness import MapGenerationRandomness
from .stats import LandmassStats, compute_landmass_stats

__all__ = [
    "LandmassGenerator",
    "LandmassResult",
    "LandmassStats",
    "MapGenerationRandomness",
    "compute_landmass_stats",
    "generate_land",
    "generate_world",
]
