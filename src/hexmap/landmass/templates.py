"""Landmass templates: geometric elevation biases per map type.

Each template is split into a deterministic geometric factor computed from
tile latitude/longitude and a bias function that mixes in per-tile random
jitter. Jitter is passed in explicitly so geometry can be tested without a
random source. All functions accept scalars or arrays of tiles.

The numeric constants are empirical tuning values.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Continent-and-islands folds the seam with a weaker gain than the others
CONTINENT_AND_ISLANDS_WRAP_GAIN = 1.1
TWO_CONTINENTS_WRAP_GAIN = 1.5
THREE_CONTINENTS_WRAP_GAIN = 1.5
FOUR_CORNERS_WRAP_GAIN = 1.5

ISLAND_SIDE_FACTOR = 0.2
SEPARATOR_BIAS_CAP = 0.2
ELLIPTIC_BIAS_CAP = 0.3


def _safe_divide(numerator: ArrayLike, denominator: ArrayLike) -> NDArray[np.float64]:
    """Elementwise division yielding 0 where the denominator is 0."""
    num, den = np.broadcast_arrays(
        np.asarray(numerator, dtype=np.float64),
        np.asarray(denominator, dtype=np.float64),
    )
    return np.divide(num, den, out=np.zeros(num.shape), where=den != 0)


def axis_factors(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Normalized distance from the splitting lines.

    Returns:
        Tuple of (latitude_factor, longitude_factor), each in [0, 1].
    """
    latitude_factor = _safe_divide(np.abs(latitude), max_latitude)
    longitude_factor = _safe_divide(np.abs(longitude), max_longitude)
    return latitude_factor, longitude_factor


def seam_factor(longitude: ArrayLike, max_longitude: float) -> NDArray[np.float64]:
    """Normalized distance from the world-wrap seam at +/- max longitude."""
    return _safe_divide(max_longitude - np.abs(longitude), max_longitude)


def _fold_seam(
    factor: NDArray[np.float64],
    longitude: ArrayLike,
    max_longitude: float,
    gain: float,
) -> NDArray[np.float64]:
    # Thinner strip, but present both at the centre and at the seam
    return np.minimum(factor, seam_factor(longitude, max_longitude)) * gain


# --- Elliptic continent (pangaea, inner sea) ---


def elliptic_continent(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    scale_jitter: ArrayLike,
    ratio_jitter: ArrayLike,
    coverage: float = 0.85,
) -> NDArray[np.float64]:
    """Bias favoring a central elliptic continent.

    The ellipse spans ``coverage`` to ``coverage + 0.1`` of the map extent,
    varying per tile with ``ratio_jitter``.

    Args:
        latitude: Tile latitudes.
        longitude: Tile longitudes.
        max_latitude: Largest absolute latitude on the map.
        max_longitude: Largest absolute longitude on the map.
        scale_jitter: Uniform [0, 1) draw per tile added to the falloff.
        ratio_jitter: Uniform [0, 1) draw per tile widening the ellipse.
        coverage: Minimum fraction of the extent covered by the ellipse.

    Returns:
        Bias values, at most 0.3, decreasing away from the centre.
    """
    ratio = coverage + 0.1 * np.asarray(ratio_jitter, dtype=np.float64)
    a = ratio * max_longitude
    b = ratio * max_latitude
    x = np.asarray(longitude, dtype=np.float64)
    y = np.asarray(latitude, dtype=np.float64)

    distance_factor = (
        _safe_divide(x * x, a * a)
        + _safe_divide(y * y, b * b)
        + _safe_divide((x + y) ** 2, (a + b) ** 2)
    )

    return np.minimum(
        ELLIPTIC_BIAS_CAP,
        1.0 - (5.0 * distance_factor * distance_factor + scale_jitter) / 3.0,
    )


# --- Separator templates ---


def separator_bias(
    factor: ArrayLike,
    jitter: ArrayLike,
    exponent: float,
) -> NDArray[np.float64]:
    """Bias that is low near a splitting line (factor 0) and rises away from it."""
    factor = np.asarray(factor, dtype=np.float64)
    return np.minimum(
        SEPARATOR_BIAS_CAP,
        -1.0 + (5.0 * factor**exponent + np.asarray(jitter)) / 3.0,
    )


def continent_and_islands_factor(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    is_north: bool,
    is_latitude: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Separator factor with one hemisphere flattened into an island belt.

    On the longitude axis, ``is_north`` selects the western half.
    """
    latitude_factor, longitude_factor = axis_factors(
        latitude, longitude, max_latitude, max_longitude
    )

    if is_latitude:
        lat = np.asarray(latitude)
        island_side = lat < 0 if is_north else lat > 0
        factor = np.where(island_side, ISLAND_SIDE_FACTOR, latitude_factor)
    else:
        lon = np.asarray(longitude)
        island_side = lon < 0 if is_north else lon > 0
        factor = np.where(island_side, ISLAND_SIDE_FACTOR, longitude_factor)

    if world_wrap:
        factor = _fold_seam(
            factor, longitude, max_longitude, CONTINENT_AND_ISLANDS_WRAP_GAIN
        )
    return factor


def continent_and_islands(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    jitter: ArrayLike,
    is_north: bool,
    is_latitude: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Bias for one continent facing a hemisphere of islands."""
    factor = continent_and_islands_factor(
        latitude,
        longitude,
        max_latitude,
        max_longitude,
        is_north,
        is_latitude,
        world_wrap,
    )
    return separator_bias(factor, jitter, exponent=0.6)


def two_continents_factor(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    is_latitude: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Separator factor splitting the map in two along the chosen axis.

    With world wrap the fold always uses the longitude factor, even on the
    latitude axis.
    """
    latitude_factor, longitude_factor = axis_factors(
        latitude, longitude, max_latitude, max_longitude
    )
    factor = latitude_factor if is_latitude else longitude_factor

    if world_wrap:
        factor = _fold_seam(
            longitude_factor, longitude, max_longitude, TWO_CONTINENTS_WRAP_GAIN
        )
    return factor


def two_continents(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    jitter: ArrayLike,
    is_latitude: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Bias for two continents separated by a water strip."""
    factor = two_continents_factor(
        latitude, longitude, max_latitude, max_longitude, is_latitude, world_wrap
    )
    return separator_bias(factor, jitter, exponent=0.6)


def three_continents_factor(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    is_north: bool,
    is_east_west: bool,
    flat_earth: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Four-quadrant factor with one half merged into a single centred continent.

    The merged continent uses half the map width, a third on flat earth.
    In east/west mode ``is_north`` selects the western half.
    """
    latitude_factor, longitude_factor = axis_factors(
        latitude, longitude, max_latitude, max_longitude
    )
    size_reduction = 3.0 if flat_earth else 2.0
    lat = np.asarray(latitude, dtype=np.float64)
    lon = np.asarray(longitude, dtype=np.float64)

    if is_east_west:
        merged_side = lon < 0 if is_north else lon > 0
        band = _safe_divide(
            np.maximum(0.0, max_latitude - np.abs(lat * size_reduction)), max_latitude
        )
        latitude_factor = np.where(merged_side, band, latitude_factor)
    else:
        merged_side = lat < 0 if is_north else lat > 0
        band = _safe_divide(
            np.maximum(0.0, max_longitude - np.abs(lon * size_reduction)), max_longitude
        )
        longitude_factor = np.where(merged_side, band, longitude_factor)

    factor = np.minimum(longitude_factor, latitude_factor)

    if world_wrap:
        factor = _fold_seam(
            factor, longitude, max_longitude, THREE_CONTINENTS_WRAP_GAIN
        )
    return factor


def three_continents(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    jitter: ArrayLike,
    is_north: bool,
    is_east_west: bool,
    flat_earth: bool,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Bias for two cornered continents plus one merged continent."""
    factor = three_continents_factor(
        latitude,
        longitude,
        max_latitude,
        max_longitude,
        is_north,
        is_east_west,
        flat_earth,
        world_wrap,
    )
    return separator_bias(factor, jitter, exponent=0.5)


def four_corners_factor(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Distance from the nearer of the two centre lines."""
    latitude_factor, longitude_factor = axis_factors(
        latitude, longitude, max_latitude, max_longitude
    )
    factor = np.minimum(longitude_factor, latitude_factor)

    if world_wrap:
        factor = _fold_seam(factor, longitude, max_longitude, FOUR_CORNERS_WRAP_GAIN)
    return factor


def four_corners(
    latitude: ArrayLike,
    longitude: ArrayLike,
    max_latitude: float,
    max_longitude: float,
    jitter: ArrayLike,
    world_wrap: bool,
) -> NDArray[np.float64]:
    """Bias for four quadrant landmasses separated by a cross of water.

    Unlike the other separators the bias is uncapped and grows with the
    factor.
    """
    factor = four_corners_factor(
        latitude, longitude, max_latitude, max_longitude, world_wrap
    )
    should_be_water = 1.0 - factor
    return 1.0 - (5.0 * should_be_water * should_be_water + np.asarray(jitter)) / 3.0
