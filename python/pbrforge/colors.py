"""Color conversion and blending utilities for pbrforge synthesizers."""

from __future__ import annotations

import re
from typing import Tuple, Union

import numpy as np

RGB = Tuple[int, int, int]

NEUTRAL_GRAY: RGB = (128, 128, 128)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert hex color to RGB tuple (0-255 range).

    Args:
        hex_color: Color in hex format, e.g. '#FF5500' or 'FF5500'

    Returns:
        Tuple of (R, G, B) values in 0-255 range, or neutral gray
        (128, 128, 128) when the string is not a 6-digit hex color.
    """
    match = _HEX_RE.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return NEUTRAL_GRAY
    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def is_hex_color(hex_color: str) -> bool:
    return isinstance(hex_color, str) and _HEX_RE.fullmatch(hex_color) is not None


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = (int(clamp(c)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def round_half_up(v):
    """Round ties toward +inf, elementwise for arrays."""
    return np.floor(np.asarray(v, dtype=np.float64) + 0.5)


def lerp_color(c1: RGB, c2: RGB, t: Union[float, np.ndarray]) -> np.ndarray:
    """Per-channel linear blend from ``c1`` to ``c2``, rounded to whole values.

    ``t`` is not clamped; values outside [0, 1] extrapolate past either color.
    Returns an array with a trailing channel axis of length 3, shaped
    ``np.shape(t) + (3,)``.
    """
    a = np.asarray(c1, dtype=np.float64)
    b = np.asarray(c2, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)[..., None]
    return round_half_up(a + (b - a) * t)


def clamp(v, lo: float = 0, hi: float = 255):
    """Bound ``v`` to [lo, hi]; works on scalars and arrays."""
    if np.ndim(v) == 0:
        return max(lo, min(hi, v))
    return np.clip(v, lo, hi)
