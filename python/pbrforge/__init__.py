# python/pbrforge/__init__.py
# Public Python API for the procedural PBR material synthesizer
# Exists to expose the four map generators, parameters and helpers from one import
# RELEVANT FILES: python/pbrforge/maps.py, python/pbrforge/params.py, tests/test_api.py
from .errors import InvalidParameterError
from .noise import noise3, perlin_noise, fbm
from .colors import hex_to_rgb, lerp_color, clamp, rgb_to_hex
from .patterns import PatternStyle, PatternSample, resolve_style, evaluate_pattern
from .params import (
    DEFAULT_SIZE,
    PREVIEW_SIZE,
    GenerationParameters,
    load_parameters,
)
from .maps import (
    generate_albedo_map,
    generate_normal_map,
    generate_roughness_map,
    generate_metalness_map,
    generate_map,
    generate_material,
)
from .textures import MAP_KINDS, MapTexture, MaterialTextureSet
from .materials import MaterialType, material_parameters
from .presets import PresetLibrary, TexturePreset
from .export import build_texture_filename, encode_png, export_material, save_png
from . import materials, normalmap, presets

__version__ = "0.1.0"

__all__ = [
    "InvalidParameterError",
    "noise3",
    "perlin_noise",
    "fbm",
    "hex_to_rgb",
    "lerp_color",
    "clamp",
    "rgb_to_hex",
    "PatternStyle",
    "PatternSample",
    "resolve_style",
    "evaluate_pattern",
    "DEFAULT_SIZE",
    "PREVIEW_SIZE",
    "GenerationParameters",
    "load_parameters",
    "generate_albedo_map",
    "generate_normal_map",
    "generate_roughness_map",
    "generate_metalness_map",
    "generate_map",
    "generate_material",
    "MAP_KINDS",
    "MapTexture",
    "MaterialTextureSet",
    "MaterialType",
    "material_parameters",
    "PresetLibrary",
    "TexturePreset",
    "build_texture_filename",
    "encode_png",
    "export_material",
    "save_png",
    "materials",
    "normalmap",
    "presets",
    "__version__",
]
