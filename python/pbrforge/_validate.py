# python/pbrforge/_validate.py
# Input guards shared by parameter parsing and the map synthesizers.
# Exists to keep size/float checks and their error messages in one place.
# RELEVANT FILES:python/pbrforge/params.py,python/pbrforge/maps.py,tests/test_params.py
from __future__ import annotations

import math
from typing import Any, Sequence, Tuple

from .errors import InvalidParameterError


def _as_int(name: str, v: Any) -> int:
    if isinstance(v, bool):
        raise InvalidParameterError(name, f"{name} must be an integer, got bool")
    if isinstance(v, float) and not v.is_integer():
        raise InvalidParameterError(name, f"{name} must be an integer, got {v!r}")
    try:
        i = int(v)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(name, f"{name} must be an integer, got {type(v).__name__}") from e
    return i


def size(v: Any, name: str = "size") -> int:
    s = _as_int(name, v)
    if s <= 0:
        raise InvalidParameterError(name, f"{name} must be > 0")
    return s


def finite_float(v: Any, name: str) -> float:
    try:
        f = float(v)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(name, f"{name} must be a number, got {type(v).__name__}") from e
    if not math.isfinite(f):
        raise InvalidParameterError(name, f"{name} must be finite, got {f!r}")
    return f


def positive_float(v: Any, name: str) -> float:
    f = finite_float(v, name)
    if f <= 0.0:
        raise InvalidParameterError(name, f"{name} must be > 0")
    return f


def octaves(v: Any) -> int:
    o = _as_int("octaves", v)
    if o < 1:
        raise InvalidParameterError("octaves", "octaves must be >= 1")
    return o


def hex_palette(v: Any, name: str = "color_palette") -> Tuple[str, ...]:
    """Normalize a palette to a tuple of strings.

    Entries are not parsed here; malformed colors fall back to gray at synthesis time.
    """
    if isinstance(v, (str, bytes)) or not isinstance(v, Sequence):
        raise InvalidParameterError(name, f"{name} must be a sequence of hex color strings")
    if len(v) == 0:
        raise InvalidParameterError(name, f"{name} must contain at least one color")
    return tuple(str(c) for c in v)
