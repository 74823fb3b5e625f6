# python/pbrforge/params.py
# Generation parameter parsing for the procedural material synthesizers
# Exists to turn wire-format mappings, JSON files and overrides into one validated value
# RELEVANT FILES: python/pbrforge/maps.py, python/pbrforge/materials.py, python/pbrforge/presets.py, tests/test_params.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from . import _validate
from .colors import is_hex_color
from .errors import InvalidParameterError
from .patterns import PatternStyle, resolve_style

logger = logging.getLogger(__name__)

ParameterSource = Union["GenerationParameters", Mapping[str, Any], str, Path, None]

DEFAULT_SIZE = 512
PREVIEW_SIZE = 256

# Wire (camelCase) name -> dataclass field.
_KEY_ALIASES: Dict[str, str] = {
    "baseColor": "base_color",
    "bumpIntensity": "bump_intensity",
    "patternScale": "pattern_scale",
    "colorVariation": "color_variation",
    "patternStyle": "pattern_style",
    "colorPalette": "color_palette",
    "tilingScale": "tiling_scale",
}
_WIRE_NAMES: Dict[str, str] = {v: k for k, v in _KEY_ALIASES.items()}


@dataclass(frozen=True)
class GenerationParameters:
    """Everything needed to synthesize one material.

    Floats outside [0, 1] are accepted and extrapolate. Malformed colors and
    unknown pattern styles are kept as given; the synthesizers degrade them to
    gray and ``noise`` respectively.
    """
    base_color: str = "#8a8a8a"
    roughness: float = 0.2
    metalness: float = 0.95
    bump_intensity: float = 0.3
    pattern_scale: float = 1.0
    color_variation: float = 0.1
    pattern_style: str = "brushed"
    color_palette: Tuple[str, ...] = field(default=("#8a8a8a", "#b0b0b0", "#606060"))
    tiling_scale: float = 1.0
    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_color", str(self.base_color))
        object.__setattr__(self, "pattern_style", str(self.pattern_style))
        for name in ("roughness", "metalness", "bump_intensity", "color_variation"):
            object.__setattr__(self, name, _validate.finite_float(getattr(self, name), name))
        for name in ("pattern_scale", "tiling_scale"):
            object.__setattr__(self, name, _validate.positive_float(getattr(self, name), name))
        object.__setattr__(self, "color_palette", _validate.hex_palette(self.color_palette))
        object.__setattr__(self, "size", _validate.size(self.size))

    @property
    def scale(self) -> float:
        """Effective sampling scale."""
        return self.pattern_scale * self.tiling_scale

    @property
    def style(self) -> PatternStyle:
        return resolve_style(self.pattern_style)

    def with_overrides(self, **overrides: Any) -> "GenerationParameters":
        return GenerationParameters.from_mapping(overrides, self)

    def malformed_colors(self) -> Tuple[str, ...]:
        """Colors that will fall back to neutral gray."""
        return tuple(c for c in (self.base_color,) + self.color_palette if not is_hex_color(c))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase wire keys."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "color_palette":
                value = list(value)
            out[_WIRE_NAMES.get(f.name, f.name)] = value
        return out

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], default: Optional["GenerationParameters"] = None
    ) -> "GenerationParameters":
        base = default if default is not None else cls()
        known = {f.name for f in fields(cls)}
        updates: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise InvalidParameterError(str(key), f"Unknown generation parameter: {key!r}")
            updates[name] = value
        return replace(base, **updates)


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise TypeError(f"parameter file must contain a JSON object: {path}")
        return data
    raise ValueError(f"Unsupported parameter file format: {path}")


def load_parameters(
    source: ParameterSource = None, overrides: Optional[Mapping[str, Any]] = None
) -> GenerationParameters:
    """Build validated parameters from a value, mapping, JSON path or None (defaults)."""
    if isinstance(source, GenerationParameters):
        params = source
    elif isinstance(source, Mapping):
        params = GenerationParameters.from_mapping(source)
    elif isinstance(source, (str, Path)):
        params = GenerationParameters.from_mapping(_load_from_path(Path(source)))
        logger.debug("Loaded generation parameters from %s", source)
    elif source is None:
        params = GenerationParameters()
    else:
        raise TypeError("params must be GenerationParameters, mapping, path, or None")

    if overrides:
        params = params.with_overrides(**overrides)

    bad = params.malformed_colors()
    if bad:
        logger.warning("Malformed colors %s will render as neutral gray", list(bad))
    if params.style.value != params.pattern_style:
        logger.warning("Pattern style %r has no synthesizer, rendering as 'noise'", params.pattern_style)
    return params
