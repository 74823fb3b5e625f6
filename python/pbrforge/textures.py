# python/pbrforge/textures.py
# Texture containers for the four generated PBR maps.
# Exists to hand rasters to viewers/exporters with their color-space flag attached.
# RELEVANT FILES:python/pbrforge/maps.py,python/pbrforge/export.py,tests/test_textures.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

import numpy as np

MAP_KINDS: Tuple[str, ...] = ("albedo", "normal", "roughness", "metalness")

# Color maps are sRGB; data maps are linear.
_SRGB_KINDS = frozenset({"albedo"})


@dataclass(frozen=True)
class MapTexture:
    kind: str
    data: np.ndarray
    srgb: bool

    @property
    def size(self) -> int:
        return int(self.data.shape[0])


@dataclass(frozen=True)
class MaterialTextureSet:
    albedo: MapTexture
    normal: MapTexture
    roughness: MapTexture
    metalness: MapTexture

    def __iter__(self) -> Iterator[MapTexture]:
        return iter((self.albedo, self.normal, self.roughness, self.metalness))

    def as_dict(self) -> Dict[str, np.ndarray]:
        return {tex.kind: tex.data for tex in self}

    def metallic_roughness(self) -> np.ndarray:
        """Pack into one glTF metallic-roughness texture (G = roughness, B = metalness)."""
        return pack_metallic_roughness(self.roughness.data, self.metalness.data)


def _ensure_rgba8(arr: np.ndarray) -> np.ndarray:
    if not isinstance(arr, np.ndarray):
        raise TypeError("texture must be a numpy array")

    if arr.dtype != np.uint8:
        raise TypeError("texture dtype must be uint8")

    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("texture must be (H,W,3|4)")

    if arr.flags.c_contiguous is False:
        arr = np.ascontiguousarray(arr)

    if arr.shape[2] == 3:
        h, w, _ = arr.shape
        rgba = np.empty((h, w, 4), dtype=np.uint8)
        rgba[..., :3] = arr
        rgba[..., 3] = 255
        return rgba
    return arr


def make_texture(kind: str, data: np.ndarray) -> MapTexture:
    if kind not in MAP_KINDS:
        raise ValueError(f"Unknown map kind: {kind!r}")
    return MapTexture(kind=kind, data=_ensure_rgba8(data), srgb=kind in _SRGB_KINDS)


def build_texture_set(
    albedo: np.ndarray,
    normal: np.ndarray,
    roughness: np.ndarray,
    metalness: np.ndarray,
) -> MaterialTextureSet:
    return MaterialTextureSet(
        albedo=make_texture("albedo", albedo),
        normal=make_texture("normal", normal),
        roughness=make_texture("roughness", roughness),
        metalness=make_texture("metalness", metalness),
    )


def pack_metallic_roughness(roughness: np.ndarray, metalness: np.ndarray) -> np.ndarray:
    """Combine grayscale roughness and metalness rasters into a glTF MR texture.

    R is left at 255 (no occlusion), alpha is 255.
    """
    rough = _ensure_rgba8(roughness)
    metal = _ensure_rgba8(metalness)
    if rough.shape != metal.shape:
        raise ValueError(f"roughness {rough.shape} and metalness {metal.shape} must match")
    packed = np.full(rough.shape, 255, dtype=np.uint8)
    packed[..., 1] = rough[..., 0]
    packed[..., 2] = metal[..., 0]
    return packed

