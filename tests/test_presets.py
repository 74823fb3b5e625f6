"""Tests for material categories and the preset library."""
import json

import numpy as np
import pytest

import pbrforge as pf
from pbrforge import materials
from pbrforge.materials import MaterialType
from pbrforge.presets import PresetLibrary, TexturePreset


def test_all_categories_build_valid_parameters():
    assert materials.available() == [
        "metal", "wood", "stone", "fabric", "plastic", "organic", "ceramic", "concrete",
    ]
    for name in materials.available():
        params = materials.material_parameters(name)
        assert params.color_palette[0] == params.base_color
        assert params.pattern_style in materials.pattern_styles(name)


def test_category_lookup_is_normalized():
    assert materials.get(" Wood ")["pattern_style"] == "grain"
    assert materials.get(MaterialType.FABRIC)["pattern_style"] == "weave"


def test_get_returns_independent_copies():
    cfg = materials.get("metal")
    cfg["color_palette"].append("#000000")
    assert len(materials.get("metal")["color_palette"]) == 3


def test_unknown_category_raises():
    with pytest.raises(pf.InvalidParameterError, match="Unknown material type") as exc:
        materials.material_parameters("lava")
    assert exc.value.field == "material_type"


def test_extended_categories_store_as_stone():
    assert materials.to_material_type("ceramic") is MaterialType.STONE
    assert materials.to_material_type("concrete") is MaterialType.STONE
    assert materials.to_material_type("wood") is MaterialType.WOOD


def test_save_get_and_overwrite():
    lib = PresetLibrary()
    first = lib.save("steel", "metal", materials.material_parameters("metal"), owner="alice")
    assert lib.get("steel", owner="alice") is first
    assert lib.get("steel") is first
    assert "steel" in lib

    rougher = materials.material_parameters("metal", roughness=0.6)
    lib.save("steel", "metal", rougher, owner="alice")
    assert len(lib) == 1
    assert lib.get("steel", owner="alice").parameters.roughness == 0.6


def test_same_name_is_scoped_by_owner():
    lib = PresetLibrary()
    lib.save("oak", "wood", materials.material_parameters("wood"), owner="alice")
    lib.save("oak", "wood", materials.material_parameters("wood"), owner="bob")
    assert len(lib) == 2
    assert [p.owner for p in lib.by_owner("bob")] == ["bob"]


def test_delete_and_missing_delete():
    lib = PresetLibrary()
    lib.save("slate", "stone", materials.material_parameters("stone"))
    lib.delete("slate")
    assert lib.get("slate") is None
    with pytest.raises(KeyError, match="slate"):
        lib.delete("slate")


def test_listing_and_filtering():
    lib = PresetLibrary()
    lib.save("zinc", "metal", materials.material_parameters("metal"))
    lib.save("birch", "wood", materials.material_parameters("wood"))
    lib.save("tile", "ceramic", materials.material_parameters("ceramic"))
    assert [p.name for p in lib.all_by_name()] == ["birch", "tile", "zinc"]
    assert [p.name for p in lib.by_material_type("stone")] == ["tile"]
    assert [p.name for p in lib.by_material_type(MaterialType.METAL)] == ["zinc"]


def test_empty_name_is_rejected():
    with pytest.raises(pf.InvalidParameterError, match="empty") as exc:
        PresetLibrary().save("  ", "metal", pf.GenerationParameters())
    assert exc.value.field == "name"


def test_preset_expands_with_category_defaults():
    stored = pf.GenerationParameters(
        roughness=0.4,
        metalness=0.1,
        pattern_style="marble",
        color_palette=("#112233", "#445566"),
        tiling_scale=3.0,
        bump_intensity=0.05,
    )
    preset = TexturePreset(name="veined", material_type=MaterialType.STONE, parameters=stored)
    params = preset.to_parameters()
    assert params.base_color == "#112233"
    assert params.roughness == 0.4
    assert params.pattern_style == "marble"
    assert params.tiling_scale == 3.0
    # not part of a stored preset: taken from the stone category
    assert params.bump_intensity == 0.8
    assert params.pattern_scale == 1.5


def test_json_persistence_round_trip(tmp_path):
    lib = PresetLibrary()
    lib.save("walnut", "wood", materials.material_parameters("wood", tiling_scale=2.0), owner="alice")
    lib.save("denim", "fabric", materials.material_parameters("fabric"), owner="bob")
    path = lib.save_json(tmp_path / "presets.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert {d["materialType"] for d in data} == {"wood", "fabric"}

    loaded = PresetLibrary.load_json(path)
    assert len(loaded) == 2
    walnut = loaded.get("walnut", owner="alice")
    assert walnut == lib.get("walnut", owner="alice")
    assert np.array_equal(
        pf.generate_albedo_map(walnut.to_parameters(), 8),
        pf.generate_albedo_map(lib.get("walnut").to_parameters(), 8),
    )


def test_load_json_rejects_non_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(TypeError, match="JSON list"):
        PresetLibrary.load_json(path)


def test_preset_mapping_requires_name():
    with pytest.raises(pf.InvalidParameterError, match="name"):
        TexturePreset.from_mapping({"materialType": "metal", "parameters": {}})
