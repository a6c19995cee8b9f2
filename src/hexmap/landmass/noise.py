"""Coherent noise sampled at world-space tile positions.

Provides seeded 2D Perlin gradient noise, fractal (fBm) summation
and a ridged variant. All functions accept scalars or numpy arrays.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Axis-aligned gradients keep every octave inside [-1, 1]
_GRADIENTS = np.array([[1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0]])


def permutation_table(seed: float) -> NDArray[np.int64]:
    """Build the doubled 256-entry permutation table for a seed.

    Args:
        seed: Noise seed. Fractional parts are dropped, negative seeds allowed.

    Returns:
        Array of 512 lattice hashes.
    """
    rng = np.random.default_rng(int(seed) & 0xFFFFFFFF)
    perm = rng.permutation(256).astype(np.int64)
    return np.concatenate([perm, perm])


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    return a + t * (b - a)


def _gradient(
    h: NDArray[np.int64],
    dx: NDArray[np.float64],
    dy: NDArray[np.float64],
) -> NDArray[np.float64]:
    g = _GRADIENTS[h % 4]
    return g[..., 0] * dx + g[..., 1] * dy


def gradient_noise(
    x: ArrayLike,
    y: ArrayLike,
    perm: NDArray[np.int64],
) -> NDArray[np.float64]:
    """Single octave of 2D Perlin noise.

    Args:
        x: Sample x coordinates.
        y: Sample y coordinates.
        perm: Permutation table from :func:`permutation_table`.

    Returns:
        Noise values in [-1, 1], zero on integer lattice points.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    x_floor = np.floor(x)
    y_floor = np.floor(y)
    xf = x - x_floor
    yf = y - y_floor
    xi = x_floor.astype(np.int64) & 255
    yi = y_floor.astype(np.int64) & 255

    u = _fade(xf)
    v = _fade(yf)

    h00 = perm[perm[xi] + yi]
    h10 = perm[perm[xi + 1] + yi]
    h01 = perm[perm[xi] + yi + 1]
    h11 = perm[perm[xi + 1] + yi + 1]

    x1 = _lerp(_gradient(h00, xf, yf), _gradient(h10, xf - 1, yf), u)
    x2 = _lerp(_gradient(h01, xf, yf - 1), _gradient(h11, xf - 1, yf - 1), u)
    return _lerp(x1, x2, v)


def perlin_noise(
    x: ArrayLike,
    y: ArrayLike,
    seed: float,
    octaves: int = 6,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
    scale: float = 10.0,
) -> NDArray[np.float64]:
    """Fractal Perlin noise at world-space coordinates.

    Sums octaves at increasing frequency and decreasing amplitude,
    normalized by the total amplitude.

    Args:
        x: World x coordinates.
        y: World y coordinates.
        seed: Noise seed shared by every sample of one field.
        octaves: Number of noise layers to sum.
        persistence: Amplitude multiplier between octaves.
        lacunarity: Frequency multiplier between octaves.
        scale: World distance covered by one base lattice cell.

    Returns:
        Noise values in [-1, 1].
    """
    perm = permutation_table(seed)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 1.0
    max_amplitude = 0.0

    for _ in range(octaves):
        octave = gradient_noise(x * frequency / scale, y * frequency / scale, perm)
        total += amplitude * octave
        max_amplitude += amplitude
        frequency *= lacunarity
        amplitude *= persistence

    if max_amplitude == 0:
        return total
    return total / max_amplitude


def ridged_noise(
    x: ArrayLike,
    y: ArrayLike,
    seed: float,
    octaves: int = 10,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
    scale: float = 15.0,
) -> NDArray[np.float64]:
    """Ridged fractal noise for sharp ridgelines and scattered islands.

    Each octave is folded as ``(1 - |noise|)^2`` so zero crossings become
    ridges.

    Args:
        x: World x coordinates.
        y: World y coordinates.
        seed: Noise seed.
        octaves: Number of noise layers.
        persistence: Amplitude multiplier between octaves.
        lacunarity: Frequency multiplier between octaves.
        scale: World distance covered by one base lattice cell.

    Returns:
        Noise values in [0, 1].
    """
    perm = permutation_table(seed)
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 1.0
    max_amplitude = 0.0

    for _ in range(octaves):
        octave = gradient_noise(x * frequency / scale, y * frequency / scale, perm)
        signal = 1.0 - np.abs(octave)
        total += amplitude * signal * signal
        max_amplitude += amplitude
        frequency *= lacunarity
        amplitude *= persistence

    if max_amplitude == 0:
        return total
    return total / max_amplitude
