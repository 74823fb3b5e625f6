"""
python/pbrforge/materials.py
Built-in material categories and their default generation parameters.

Each category returns a plain dict compatible with
python/pbrforge/params.py::GenerationParameters.from_mapping(). The
``metal`` category doubles as the library-wide default.

Example
-------
>>> from pbrforge import materials, generate_albedo_map
>>> params = materials.material_parameters("wood", tiling_scale=2.0)
>>> albedo = generate_albedo_map(params, 256)
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List

from .errors import InvalidParameterError
from .params import GenerationParameters


class MaterialType(Enum):
    """Material categories a stored preset may carry."""
    METAL = "metal"
    ORGANIC = "organic"
    WOOD = "wood"
    STONE = "stone"
    PLASTIC = "plastic"
    FABRIC = "fabric"


# -----------------------------------------------------------------------------
# Category definitions
# -----------------------------------------------------------------------------

_CONFIGS: Dict[str, Dict[str, Any]] = {
    "metal": {
        "roughness": 0.2,
        "metalness": 0.95,
        "bump_intensity": 0.3,
        "pattern_scale": 1.0,
        "color_variation": 0.1,
        "pattern_style": "brushed",
        "base_color": "#8a8a8a",
        "color_palette": ["#8a8a8a", "#b0b0b0", "#606060"],
    },
    "wood": {
        "roughness": 0.75,
        "metalness": 0.0,
        "bump_intensity": 0.6,
        "pattern_scale": 2.0,
        "color_variation": 0.4,
        "pattern_style": "grain",
        "base_color": "#8B5E3C",
        "color_palette": ["#8B5E3C", "#6B4226", "#A0714F"],
    },
    "stone": {
        "roughness": 0.85,
        "metalness": 0.0,
        "bump_intensity": 0.8,
        "pattern_scale": 1.5,
        "color_variation": 0.3,
        "pattern_style": "cracked",
        "base_color": "#7a7a72",
        "color_palette": ["#7a7a72", "#5a5a52", "#9a9a92"],
    },
    "fabric": {
        "roughness": 0.95,
        "metalness": 0.0,
        "bump_intensity": 0.4,
        "pattern_scale": 3.0,
        "color_variation": 0.2,
        "pattern_style": "weave",
        "base_color": "#4a6fa5",
        "color_palette": ["#4a6fa5", "#2a4f85", "#6a8fc5"],
    },
    "plastic": {
        "roughness": 0.3,
        "metalness": 0.0,
        "bump_intensity": 0.1,
        "pattern_scale": 1.0,
        "color_variation": 0.05,
        "pattern_style": "smooth",
        "base_color": "#e03030",
        "color_palette": ["#e03030", "#c02020", "#ff5050"],
    },
    "organic": {
        "roughness": 0.7,
        "metalness": 0.0,
        "bump_intensity": 0.7,
        "pattern_scale": 2.5,
        "color_variation": 0.5,
        "pattern_style": "cellular",
        "base_color": "#4a7a3a",
        "color_palette": ["#4a7a3a", "#2a5a1a", "#6a9a5a"],
    },
    "ceramic": {
        "roughness": 0.15,
        "metalness": 0.05,
        "bump_intensity": 0.2,
        "pattern_scale": 1.0,
        "color_variation": 0.08,
        "pattern_style": "smooth",
        "base_color": "#e8e0d0",
        "color_palette": ["#e8e0d0", "#d0c8b8", "#f0e8d8"],
    },
    "concrete": {
        "roughness": 0.9,
        "metalness": 0.0,
        "bump_intensity": 0.9,
        "pattern_scale": 1.8,
        "color_variation": 0.25,
        "pattern_style": "noise",
        "base_color": "#888880",
        "color_palette": ["#888880", "#686860", "#a8a8a0"],
    },
}

# Style names offered per category. Only some have a dedicated synthesizer
# branch; the rest render as ``noise``.
PATTERN_STYLES: Dict[str, List[str]] = {
    "metal": ["brushed", "polished", "hammered", "corrugated", "perforated"],
    "wood": ["grain", "plank", "parquet", "bark", "knot"],
    "stone": ["cracked", "marble", "granite", "slate", "cobble"],
    "fabric": ["weave", "knit", "denim", "silk", "canvas"],
    "plastic": ["smooth", "matte", "glossy", "textured", "carbon"],
    "organic": ["cellular", "scales", "bark", "moss", "coral"],
    "ceramic": ["smooth", "crackle", "glazed", "terracotta", "porcelain"],
    "concrete": ["noise", "poured", "stamped", "exposed", "polished"],
}


def _normalize_name(name: Any) -> str:
    if isinstance(name, MaterialType):
        return name.value
    return "".join(c for c in str(name).strip().lower() if c not in {"-", "_", " ", "."})


def available() -> List[str]:
    return list(_CONFIGS.keys())


def get(name: Any) -> Dict[str, Any]:
    """Return a fresh copy of the category's parameter mapping."""
    key = _normalize_name(name)
    if key not in _CONFIGS:
        raise InvalidParameterError(
            "material_type", f"Unknown material type: {name!r}. Available: {', '.join(available())}"
        )
    cfg = dict(_CONFIGS[key])
    cfg["color_palette"] = list(cfg["color_palette"])
    return cfg


def material_parameters(name: Any, **overrides: Any) -> GenerationParameters:
    cfg = get(name)
    cfg.update(overrides)
    return GenerationParameters.from_mapping(cfg)


def pattern_styles(name: Any) -> List[str]:
    get(name)
    return list(PATTERN_STYLES[_normalize_name(name)])


def to_material_type(name: Any) -> MaterialType:
    """Map any category to a storable MaterialType; ceramic and concrete store as stone."""
    key = _normalize_name(name)
    get(key)
    try:
        return MaterialType(key)
    except ValueError:
        return MaterialType.STONE
