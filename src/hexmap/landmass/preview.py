"""Land/water previews of a generated map: text and 1-pixel-per-cell images.

Both previews lay tiles out on a latitude (row) by longitude (column) grid,
north at the top. Hex rows interleave, so only cells whose latitude and
longitude share parity hold a tile.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from ..tile_map import TileMap

LAND_CHAR = "#"
WATER_CHAR = "~"

LAND_COLOR = (60, 150, 60)  # Green
WATER_COLOR = (20, 60, 140)  # Dark blue
EMPTY_COLOR = (0, 0, 0)

# Cell values in the preview grid
_EMPTY = 0
_LAND = 1
_WATER = 2


def _preview_grid(tile_map: TileMap, water_terrain: str | None) -> np.ndarray:
    if len(tile_map) == 0:
        return np.zeros((0, 0), dtype=np.uint8)

    latitudes = tile_map.latitudes().astype(np.int64)
    longitudes = tile_map.longitudes().astype(np.int64)
    rows = latitudes.max() - latitudes
    cols = longitudes - longitudes.min()

    grid = np.full((rows.max() + 1, cols.max() + 1), _EMPTY, dtype=np.uint8)
    is_water = np.array(
        [
            water_terrain is not None and t.base_terrain == water_terrain
            for t in tile_map
        ],
        dtype=bool,
    )
    grid[rows, cols] = np.where(is_water, _WATER, _LAND)
    return grid


def render_ascii(tile_map: TileMap, water_terrain: str | None) -> str:
    """Render the map as text, one row per latitude.

    Positions without a tile are blank. With ``water_terrain`` None every
    tile is drawn as land.
    """
    chars = np.array([" ", LAND_CHAR, WATER_CHAR])
    grid = _preview_grid(tile_map, water_terrain)
    return "\n".join("".join(chars[row]).rstrip() for row in grid)


def render_image(
    tile_map: TileMap,
    water_terrain: str | None,
    scale: int = 4,
) -> Image.Image:
    """Render the map as an RGB image.

    Args:
        tile_map: Generated map.
        water_terrain: Terrain name drawn as water.
        scale: Pixels per grid cell along each axis.

    Returns:
        PIL Image, black where no tile exists.
    """
    palette = np.array([EMPTY_COLOR, LAND_COLOR, WATER_COLOR], dtype=np.uint8)
    grid = _preview_grid(tile_map, water_terrain)
    pixels = palette[grid]
    if scale > 1:
        pixels = pixels.repeat(scale, axis=0).repeat(scale, axis=1)
    return Image.fromarray(pixels)


def save_image(
    tile_map: TileMap,
    water_terrain: str | None,
    output_path: Path,
    scale: int = 4,
) -> Path:
    """Render and save the map preview, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    render_image(tile_map, water_terrain, scale).save(output_path)
    return output_path
