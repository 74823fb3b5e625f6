#!/usr/bin/env python3
"""
Procedural material generator

Generates albedo, normal, roughness and metalness PNGs for one material.

This example demonstrates:
- Starting from a built-in material category (metal, wood, stone, ...)
- Overriding individual generation parameters from the command line
- Loading parameters from a JSON file
- Synthesizing the four maps on worker threads with a time bound

Usage:
    # Default: brushed metal at 512px into ./out
    python examples/generate_material.py

    # Wood at preview resolution
    python examples/generate_material.py --material wood --size 256

    # Stone with a marble pattern and tighter tiling
    python examples/generate_material.py --material stone --style marble --tiling 2.0

    # Parameters from a JSON file (camelCase or snake_case keys)
    python examples/generate_material.py --params my_material.json --out renders/
"""

import sys
from pathlib import Path

# Add python directory to path for development testing
sys.path.insert(0, str(Path(__file__).parent.parent / 'python'))

import argparse
import logging
from typing import Any, Dict, List, Optional

import pbrforge as pf
from pbrforge import materials


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate procedural PBR texture maps")
    parser.add_argument("--material", default="metal", choices=materials.available(),
                        help="Material category providing default parameters")
    parser.add_argument("--params", type=Path, default=None,
                        help="JSON file with generation parameters (overrides --material)")
    parser.add_argument("--style", default=None, help="Pattern style override")
    parser.add_argument("--base-color", default=None, help="Base color as #rrggbb")
    parser.add_argument("--palette", default=None,
                        help="Comma-separated palette colors, e.g. '#8a8a8a,#b0b0b0,#606060'")
    parser.add_argument("--roughness", type=float, default=None)
    parser.add_argument("--metalness", type=float, default=None)
    parser.add_argument("--bump", type=float, default=None, help="Bump intensity")
    parser.add_argument("--variation", type=float, default=None, help="Color variation")
    parser.add_argument("--pattern-scale", type=float, default=None)
    parser.add_argument("--tiling", type=float, default=None, help="Tiling scale")
    parser.add_argument("--size", type=int, default=pf.DEFAULT_SIZE, help="Output edge length in pixels")
    parser.add_argument("--maps", default=",".join(pf.MAP_KINDS),
                        help="Comma-separated subset of maps to write")
    parser.add_argument("--workers", type=int, default=4, help="Worker threads (0 = serial)")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds before giving up")
    parser.add_argument("--out", type=Path, default=Path("out"), help="Output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if args.style is not None:
        out["pattern_style"] = args.style
    if args.base_color is not None:
        out["base_color"] = args.base_color
    if args.palette is not None:
        out["color_palette"] = [c.strip() for c in args.palette.split(",") if c.strip()]
    for attr, key in (
        ("roughness", "roughness"),
        ("metalness", "metalness"),
        ("bump", "bump_intensity"),
        ("variation", "color_variation"),
        ("pattern_scale", "pattern_scale"),
        ("tiling", "tiling_scale"),
    ):
        value = getattr(args, attr)
        if value is not None:
            out[key] = value
    return out


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = args.params if args.params is not None else materials.get(args.material)
    try:
        params = pf.load_parameters(source, overrides=_overrides(args))
    except (ValueError, TypeError) as e:
        print(f"Error: {e}")
        return 2

    kinds = [k.strip() for k in args.maps.split(",") if k.strip()]
    unknown = [k for k in kinds if k not in pf.MAP_KINDS]
    if unknown:
        print(f"Error: unknown map kinds {unknown}; expected {', '.join(pf.MAP_KINDS)}")
        return 2

    print(f"Generating {args.material} ({params.style.value}) at {args.size}x{args.size}")
    texset = pf.generate_material(
        params, args.size, workers=args.workers or None, timeout=args.timeout
    )

    args.out.mkdir(parents=True, exist_ok=True)
    rasters = texset.as_dict()
    for kind in kinds:
        path = args.out / pf.build_texture_filename(args.material, kind)
        pf.save_png(path, rasters[kind])
        print(f"  {kind:<10} -> {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
