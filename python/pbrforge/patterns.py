# python/pbrforge/patterns.py
# Per-style procedural pattern functions shared by the four map synthesizers.
# Exists so the color-blend value and the bump height of a style come from one evaluator.
# RELEVANT FILES:python/pbrforge/noise.py,python/pbrforge/maps.py,tests/test_patterns.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np

from .noise import fbm, noise3

logger = logging.getLogger(__name__)

# |fbm| below this marks a crack line.
CRACK_THRESHOLD = 0.05


class PatternStyle(Enum):
    """Closed set of pattern styles understood by the synthesizers."""
    BRUSHED = "brushed"
    GRAIN = "grain"
    CRACKED = "cracked"
    WEAVE = "weave"
    CELLULAR = "cellular"
    MARBLE = "marble"
    NOISE = "noise"
    HAMMERED = "hammered"


def resolve_style(value: Any) -> PatternStyle:
    """Map an exact style name (or PatternStyle) to a PatternStyle; anything else becomes NOISE."""
    if isinstance(value, PatternStyle):
        return value
    try:
        return PatternStyle(value)
    except ValueError:
        logger.debug("Unknown pattern style %r, using 'noise'", value)
        return PatternStyle.NOISE


@dataclass
class PatternSample:
    """Pattern evaluation over a coordinate grid.

    value  : color-blend scalar, roughly [0, 1]
    height : bump height fed to the normal map, roughly [-1, 1]
    detail : secondary fBm term (cracked style only, when requested)
    """
    value: np.ndarray
    height: np.ndarray
    detail: Optional[np.ndarray] = None


def weave_mask(nx, ny) -> np.ndarray:
    """True where exactly one of the two orthogonal square waves is high."""
    wx = np.sin(nx * np.pi * 4) * 0.5 + 0.5
    wy = np.sin(ny * np.pi * 4) * 0.5 + 0.5
    return (wx > 0.5) != (wy > 0.5)


def crack_mask(n) -> np.ndarray:
    return np.abs(n) < CRACK_THRESHOLD


def evaluate_pattern(style: PatternStyle, nx, ny, with_detail: bool = False) -> PatternSample:
    """Evaluate ``style`` at normalized coordinates ``(nx, ny)``.

    Styles without a dedicated branch (``noise`` and ``hammered``) use plain 6-octave fBm.
    """
    nx = np.asarray(nx, dtype=np.float64)
    ny = np.asarray(ny, dtype=np.float64)

    if style is PatternStyle.BRUSHED:
        n = fbm(nx * 0.5, ny * 8, 4, 0.6)
        return PatternSample(value=(n + 1) * 0.5, height=n)

    if style is PatternStyle.GRAIN:
        ring = np.sin(nx * 6 + fbm(nx, ny, 5, 0.5) * 4) * 0.5 + 0.5
        return PatternSample(value=ring, height=ring)

    if style is PatternStyle.CRACKED:
        n1 = fbm(nx * 2, ny * 2, 6, 0.5)
        value = np.where(crack_mask(n1), 0.0, (n1 + 1) * 0.5)
        detail = fbm(nx * 4 + 100, ny * 4 + 100, 4, 0.6) if with_detail else None
        return PatternSample(value=value, height=n1, detail=detail)

    if style is PatternStyle.WEAVE:
        on = weave_mask(nx, ny)
        return PatternSample(value=on.astype(np.float64), height=np.where(on, 0.8, 0.2))

    if style is PatternStyle.CELLULAR:
        cell = np.abs(np.sin(fbm(nx * 1.5, ny * 1.5, 5, 0.55) * np.pi * 3))
        return PatternSample(value=cell, height=cell)

    if style is PatternStyle.MARBLE:
        marble = np.sin(nx * 5 + fbm(nx, ny, 8, 0.5) * 10) * 0.5 + 0.5
        return PatternSample(value=marble, height=marble)

    n = fbm(nx, ny, 6, 0.5)
    return PatternSample(value=(n + 1) * 0.5, height=n)


def roughness_variation(style: PatternStyle, nx, ny) -> np.ndarray:
    """Style-dependent offset added to the base roughness."""
    nx = np.asarray(nx, dtype=np.float64)
    ny = np.asarray(ny, dtype=np.float64)

    if style is PatternStyle.BRUSHED:
        return fbm(nx * 0.5, ny * 8, 3, 0.5) * 0.15
    if style is PatternStyle.GRAIN:
        return np.abs(np.sin(nx * 6 + fbm(nx, ny, 4, 0.5) * 3)) * 0.2
    if style is PatternStyle.CRACKED:
        n = fbm(nx * 2, ny * 2, 5, 0.5)
        return np.where(crack_mask(n), -0.3, fbm(nx * 3, ny * 3, 3, 0.5) * 0.15)
    if style is PatternStyle.WEAVE:
        return np.where(weave_mask(nx, ny), 0.1, -0.05)
    return fbm(nx, ny, 4, 0.5) * 0.1


def metalness_variation(style: PatternStyle, nx, ny) -> np.ndarray:
    """Style-dependent offset added to the base metalness; smaller than the roughness table."""
    nx = np.asarray(nx, dtype=np.float64)
    ny = np.asarray(ny, dtype=np.float64)

    if style is PatternStyle.BRUSHED:
        return fbm(nx * 0.3, ny * 5, 3, 0.5) * 0.1
    if style is PatternStyle.HAMMERED:
        return (noise3(nx * 4, ny * 4) * 0.5 + 0.5) * 0.15
    if style is PatternStyle.CRACKED:
        n = fbm(nx * 2, ny * 2, 5, 0.5)
        return np.where(crack_mask(n), -0.4, 0.0)
    return fbm(nx * 2, ny * 2, 3, 0.5) * 0.05
