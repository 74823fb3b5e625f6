# python/pbrforge/export.py
# Lossless PNG export of generated maps.
# Exists so exported files carry exactly the RGBA bytes the synthesizers produced.
# RELEVANT FILES:python/pbrforge/maps.py,python/pbrforge/textures.py,examples/generate_material.py,tests/test_export.py

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np
from PIL import Image

from .maps import generate_map
from .params import load_parameters
from .textures import MAP_KINDS

logger = logging.getLogger(__name__)


def _check_raster(array: np.ndarray) -> np.ndarray:
    if not isinstance(array, np.ndarray):
        raise TypeError("raster must be a numpy array")
    if array.dtype != np.uint8:
        raise TypeError(f"unsupported raster dtype {array.dtype}; expected uint8")
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError(f"expected (H, W, 4) RGBA raster, got shape {array.shape}")
    return np.ascontiguousarray(array)


def encode_png(array: np.ndarray) -> bytes:
    """Encode an RGBA raster as PNG bytes."""
    img = Image.fromarray(_check_raster(array))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    img = Image.open(io.BytesIO(data))
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return np.array(img, dtype=np.uint8)


def save_png(path: Union[str, Path], array: np.ndarray) -> Path:
    path_str = str(path)
    if not path_str.lower().endswith(".png"):
        raise ValueError(f"File must have .png extension, got {path_str}")
    path = Path(path_str)
    path.write_bytes(encode_png(array))
    logger.info("Saved %s", path)
    return path


def build_texture_filename(material_type: str, map_kind: str) -> str:
    """``Brushed Steel`` + ``normal`` -> ``brushed-steel-normal.png``."""
    sanitized = re.sub(r"[^a-z0-9]", "-", str(material_type).lower())
    return f"{sanitized}-{map_kind}.png"


def export_material(
    params: Any,
    out_dir: Union[str, Path],
    material_type: str = "material",
    size: Optional[int] = None,
    kinds: Iterable[str] = MAP_KINDS,
) -> Dict[str, Path]:
    """Generate the requested maps and write each one as a PNG into ``out_dir``."""
    params = load_parameters(params)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for kind in kinds:
        raster = generate_map(params, kind, size)
        written[kind] = save_png(out_dir / build_texture_filename(material_type, kind), raster)
    return written
