"""
Gradient noise primitives for pbrforge

Classic 3D gradient (Perlin) noise over a fixed permutation table, plus the
fractal Brownian motion accumulator built on top of it. Every function
accepts Python scalars or numpy arrays (broadcast together) and returns a
float for scalar input or a float64 array otherwise.
"""

from typing import Union

import numpy as np

from . import _validate

ArrayOrFloat = Union[float, np.ndarray]

_PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142,
    8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117,
    35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71,
    134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41,
    55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89,
    18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226,
    250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182,
    189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43,
    172, 9, 129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97,
    228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239,
    107, 49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Duplicated to 512 entries so table[X + 1] never wraps. Read-only after import.
PERM = np.array(_PERMUTATION + _PERMUTATION, dtype=np.int64)
PERM.setflags(write=False)


def fade(t: ArrayOrFloat) -> ArrayOrFloat:
    """Smootherstep weight 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t: ArrayOrFloat, a: ArrayOrFloat, b: ArrayOrFloat) -> ArrayOrFloat:
    return a + t * (b - a)


def grad(hash_: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    """Dot product of (x, y, z) with one of the 12 edge gradients picked by the low 4 hash bits."""
    h = hash_ & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


def noise3(x: ArrayOrFloat, y: ArrayOrFloat, z: ArrayOrFloat = 0.0) -> ArrayOrFloat:
    """Evaluate 3D gradient noise.

    Parameters
    ----------
    x, y, z : float or np.ndarray
        Sample coordinates; arrays are broadcast against each other.
        ``z`` defaults to 0 for 2D use.

    Returns
    -------
    float or np.ndarray
        Noise value(s) in [-1, 1].

    Examples
    --------
    >>> noise3(0.0, 0.0)
    0.0
    >>> field = noise3(np.linspace(0, 4, 64)[None, :], np.linspace(0, 4, 64)[:, None])
    >>> field.shape
    (64, 64)
    """
    scalar = np.ndim(x) == 0 and np.ndim(y) == 0 and np.ndim(z) == 0
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )

    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    X = fx.astype(np.int64) & 255
    Y = fy.astype(np.int64) & 255
    Z = fz.astype(np.int64) & 255

    x = x - fx
    y = y - fy
    z = z - fz

    u = fade(x)
    v = fade(y)
    w = fade(z)

    A = PERM[X] + Y
    AA = PERM[A] + Z
    AB = PERM[A + 1] + Z
    B = PERM[X + 1] + Y
    BA = PERM[B] + Z
    BB = PERM[B + 1] + Z

    out = lerp(
        w,
        lerp(
            v,
            lerp(u, grad(PERM[AA], x, y, z), grad(PERM[BA], x - 1, y, z)),
            lerp(u, grad(PERM[AB], x, y - 1, z), grad(PERM[BB], x - 1, y - 1, z)),
        ),
        lerp(
            v,
            lerp(u, grad(PERM[AA + 1], x, y, z - 1), grad(PERM[BA + 1], x - 1, y, z - 1)),
            lerp(u, grad(PERM[AB + 1], x, y - 1, z - 1), grad(PERM[BB + 1], x - 1, y - 1, z - 1)),
        ),
    )
    return float(out) if scalar else out


perlin_noise = noise3


def fbm(x: ArrayOrFloat, y: ArrayOrFloat, octaves: int = 6, persistence: float = 0.5) -> ArrayOrFloat:
    """Fractal Brownian motion: octave sum of 2D noise normalized by total amplitude.

    A single octave returns exactly ``noise3(x, y)``.
    """
    octaves = _validate.octaves(octaves)
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0

    for _ in range(octaves):
        value = value + noise3(x * frequency, y * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2

    return value / max_value
