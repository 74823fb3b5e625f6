"""Tests for texture set bundling and glTF metallic-roughness packing."""
import numpy as np
import pytest

import pbrforge as pf
from pbrforge import textures


def _gray(value, size=4):
    arr = np.full((size, size, 4), value, dtype=np.uint8)
    arr[..., 3] = 255
    return arr


def test_texture_set_flags_color_space(metal_params):
    texset = pf.generate_material(metal_params, 8)
    assert [t.kind for t in texset] == list(pf.MAP_KINDS)
    assert texset.albedo.srgb
    assert not texset.normal.srgb
    assert not texset.roughness.srgb
    assert not texset.metalness.srgb
    assert texset.albedo.size == 8


def test_pack_metallic_roughness_channels():
    packed = textures.pack_metallic_roughness(_gray(51), _gray(242))
    assert packed.shape == (4, 4, 4)
    assert np.all(packed[..., 0] == 255)
    assert np.all(packed[..., 1] == 51)
    assert np.all(packed[..., 2] == 242)


def test_material_set_packs_its_own_maps(metal_params):
    texset = pf.generate_material(metal_params, 8)
    packed = texset.metallic_roughness()
    assert np.array_equal(packed[..., 1], texset.roughness.data[..., 0])
    assert np.array_equal(packed[..., 2], texset.metalness.data[..., 0])


def test_pack_rejects_mismatched_sizes():
    with pytest.raises(ValueError, match="must match"):
        textures.pack_metallic_roughness(_gray(1, 4), _gray(1, 8))


def test_rgb_input_gains_opaque_alpha():
    tex = textures.make_texture("roughness", np.zeros((2, 2, 3), dtype=np.uint8))
    assert tex.data.shape == (2, 2, 4)
    assert np.all(tex.data[..., 3] == 255)


@pytest.mark.parametrize(
    "data, exc",
    [
        ([[0, 0]], TypeError),
        (np.zeros((2, 2, 4), dtype=np.float32), TypeError),
        (np.zeros((2, 2), dtype=np.uint8), ValueError),
    ],
)
def test_make_texture_rejects_bad_arrays(data, exc):
    with pytest.raises(exc):
        textures.make_texture("albedo", data)


def test_make_texture_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown map kind"):
        textures.make_texture("specular", np.zeros((2, 2, 4), dtype=np.uint8))
