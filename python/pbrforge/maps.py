# python/pbrforge/maps.py
# Albedo, normal, roughness and metalness synthesizers for procedural materials.
# Exists to turn one GenerationParameters value into four correlated RGBA rasters.
# RELEVANT FILES:python/pbrforge/patterns.py,python/pbrforge/normalmap.py,python/pbrforge/textures.py,tests/test_maps.py
"""Procedural PBR map synthesis.

Every synthesizer is a pure function of its parameters and size: it walks
the full ``size x size`` UV grid in one vectorized pass and returns a fresh
C-contiguous ``(size, size, 4)`` uint8 array with alpha fixed at 255.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from . import _validate
from .colors import RGB, hex_to_rgb, lerp_color, round_half_up
from .errors import InvalidParameterError
from .noise import noise3
from .normalmap import height_to_normal_map
from .params import GenerationParameters, load_parameters
from .patterns import (
    PatternStyle,
    evaluate_pattern,
    metalness_variation,
    roughness_variation,
)
from .textures import MAP_KINDS, MaterialTextureSet, build_texture_set

logger = logging.getLogger(__name__)

# Micro-noise spans 0..15*variation and is re-centered by this fixed offset.
_MICRO_NOISE_AMPLITUDE = 15
_MICRO_NOISE_OFFSET = 7
_BUMP_GAIN = 3


def _coerce(params: Any, size: Optional[int]) -> Tuple[GenerationParameters, int]:
    if not isinstance(params, GenerationParameters):
        params = load_parameters(params)
    s = _validate.size(params.size if size is None else size)
    return params, s


def _uv_grid(size: int, scale: float) -> Tuple[np.ndarray, np.ndarray]:
    """Normalized sampling coordinates; nx varies along columns, ny along rows."""
    u = np.arange(size, dtype=np.float64) / size * scale
    nx, ny = np.meshgrid(u, u)
    return nx, ny


def _rgba(rgb: np.ndarray) -> np.ndarray:
    size = rgb.shape[0]
    out = np.empty((size, size, 4), dtype=np.uint8)
    out[..., :3] = rgb
    out[..., 3] = 255
    return out


def _gray_rgba(value: np.ndarray) -> np.ndarray:
    return _rgba(np.repeat(value[..., None], 3, axis=2))


def _palette_color(palette: Sequence[RGB], indices: Sequence[int], fallback: RGB) -> RGB:
    for i in indices:
        if i < len(palette):
            return palette[i]
    return fallback


def _timed(kind: str, fn: Callable[[], np.ndarray]) -> np.ndarray:
    start = time.perf_counter()
    out = fn()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Generated %s map: shape=%s, mean=%.2f, %.1f ms",
            kind, out.shape, float(out[..., :3].mean()), (time.perf_counter() - start) * 1000.0,
        )
    return out


def generate_albedo_map(params: Any, size: Optional[int] = None) -> np.ndarray:
    """Synthesize the base color map.

    The pattern value blends the base color toward a palette color, then a
    fine noise term adds micro-variation centered near zero.

    Parameters
    ----------
    params : GenerationParameters or mapping
        Material description
    size : int, optional
        Edge length in pixels; defaults to ``params.size``

    Returns
    -------
    np.ndarray
        (size, size, 4) uint8 RGBA raster
    """
    params, size = _coerce(params, size)

    def build() -> np.ndarray:
        nx, ny = _uv_grid(size, params.scale)
        style = params.style
        base = hex_to_rgb(params.base_color)
        palette = [hex_to_rgb(c) for c in params.color_palette]
        variation = params.color_variation

        sample = evaluate_pattern(style, nx, ny, with_detail=style is PatternStyle.CRACKED)

        if style is PatternStyle.GRAIN:
            rgb = lerp_color(
                _palette_color(palette, (0,), base),
                _palette_color(palette, (1,), base),
                sample.value * variation * 2,
            )
        elif style is PatternStyle.CRACKED:
            rgb = lerp_color(base, _palette_color(palette, (1,), base),
                             sample.value * variation * 2 + sample.detail * 0.1)
        elif style is PatternStyle.WEAVE:
            rgb = lerp_color(base, _palette_color(palette, (1,), base),
                             sample.value * 0.3 + variation * 0.2)
        elif style is PatternStyle.CELLULAR:
            rgb = lerp_color(base, _palette_color(palette, (2, 1), base),
                             sample.value * variation * 2)
        else:
            rgb = lerp_color(base, _palette_color(palette, (1,), base),
                             sample.value * variation * 2)

        micro = (noise3(nx * 20, ny * 20) * 0.5 + 0.5) * _MICRO_NOISE_AMPLITUDE * variation
        channels = rgb + micro[..., None] - _MICRO_NOISE_OFFSET
        # 8-bit clamped store: clamp, then round half to even.
        return _rgba(np.rint(np.clip(channels, 0, 255)))

    return _timed("albedo", build)


def _height_field(params: GenerationParameters, size: int) -> np.ndarray:
    """(size, size) float32 height field used for the normal map."""
    nx, ny = _uv_grid(size, params.scale)
    return evaluate_pattern(params.style, nx, ny).height.astype(np.float32)


def generate_normal_map(params: Any, size: Optional[int] = None) -> np.ndarray:
    """Synthesize a tangent-space normal map from the style's height field.

    Bump strength is ``bump_intensity * 3``; flat regions encode to (128, 128, 255).
    """
    params, size = _coerce(params, size)

    def build() -> np.ndarray:
        heights = _height_field(params, size)
        return height_to_normal_map(heights, params.bump_intensity * _BUMP_GAIN)

    return _timed("normal", build)


def _grayscale(base: float, variation: np.ndarray) -> np.ndarray:
    return np.clip(round_half_up((base + variation) * 255), 0, 255)


def generate_roughness_map(params: Any, size: Optional[int] = None) -> np.ndarray:
    """Synthesize the grayscale roughness map."""
    params, size = _coerce(params, size)

    def build() -> np.ndarray:
        nx, ny = _uv_grid(size, params.scale)
        return _gray_rgba(_grayscale(params.roughness, roughness_variation(params.style, nx, ny)))

    return _timed("roughness", build)


def generate_metalness_map(params: Any, size: Optional[int] = None) -> np.ndarray:
    """Synthesize the grayscale metalness map."""
    params, size = _coerce(params, size)

    def build() -> np.ndarray:
        nx, ny = _uv_grid(size, params.scale)
        return _gray_rgba(_grayscale(params.metalness, metalness_variation(params.style, nx, ny)))

    return _timed("metalness", build)


_GENERATORS: Dict[str, Callable[..., np.ndarray]] = {
    "albedo": generate_albedo_map,
    "normal": generate_normal_map,
    "roughness": generate_roughness_map,
    "metalness": generate_metalness_map,
}


def generate_map(params: Any, kind: str, size: Optional[int] = None) -> np.ndarray:
    """Dispatch to one synthesizer by map kind."""
    key = str(kind).strip().lower()
    if key not in _GENERATORS:
        raise InvalidParameterError("kind", f"Unknown map kind: {kind!r}; expected one of {', '.join(MAP_KINDS)}")
    return _GENERATORS[key](params, size)


def generate_material(
    params: Any,
    size: Optional[int] = None,
    *,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> MaterialTextureSet:
    """Generate all four maps.

    With ``workers`` set, each map is synthesized on its own pool thread and
    ``timeout`` bounds the total wait; on expiry
    ``concurrent.futures.TimeoutError`` propagates and partial results are
    discarded.
    """
    params, size = _coerce(params, size)

    if workers is None:
        maps = {kind: _GENERATORS[kind](params, size) for kind in MAP_KINDS}
        return build_texture_set(**maps)

    if workers < 1:
        raise InvalidParameterError("workers", "workers must be >= 1")

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pbrforge")
    try:
        futures = {kind: executor.submit(_GENERATORS[kind], params, size) for kind in MAP_KINDS}
        deadline = None if timeout is None else time.monotonic() + timeout
        maps = {}
        for kind, future in futures.items():
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            maps[kind] = future.result(timeout=remaining)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return build_texture_set(**maps)
