"""
Tests for the gradient noise engine and fBm accumulator
"""

import numpy as np
import pytest

import pbrforge as pf
from pbrforge import noise


def test_permutation_table_is_duplicated_and_read_only():
    assert noise.PERM.shape == (512,)
    assert np.array_equal(noise.PERM[:256], noise.PERM[256:])
    assert sorted(noise.PERM[:256].tolist()) == list(range(256))
    with pytest.raises(ValueError):
        noise.PERM[0] = 1


def test_noise_bounds_random_samples():
    rng = np.random.default_rng(1234)
    pts = rng.uniform(-300.0, 300.0, size=(3, 10_000))
    values = pf.noise3(pts[0], pts[1], pts[2])
    assert values.shape == (10_000,)
    assert np.all(values >= -1.0001)
    assert np.all(values <= 1.0001)


def test_noise_is_zero_on_lattice_points():
    for x, y, z in [(0, 0, 0), (1, 2, 3), (-4, 7, 0), (255, 256, 1)]:
        assert pf.noise3(x, y, z) == 0.0


def test_scalar_and_array_evaluation_agree():
    xs = np.array([0.1, 1.7, -3.25, 42.42])
    ys = np.array([0.9, -2.3, 5.5, 0.01])
    batched = pf.noise3(xs, ys)
    for i in range(len(xs)):
        value = pf.noise3(float(xs[i]), float(ys[i]))
        assert isinstance(value, float)
        assert value == batched[i]


def test_noise_default_z_is_zero():
    assert pf.noise3(0.3, 0.7) == pf.noise3(0.3, 0.7, 0.0)


def test_noise_is_deterministic():
    grid = np.linspace(-5, 5, 101)
    a = pf.noise3(grid[None, :], grid[:, None], 0.5)
    b = pf.noise3(grid[None, :], grid[:, None], 0.5)
    assert np.array_equal(a, b)


def test_noise_varies_between_lattice_points():
    grid = np.linspace(0.05, 7.95, 80)
    values = pf.noise3(grid[None, :], grid[:, None])
    assert values.std() > 0.05


def test_fade_endpoints_and_midpoint():
    assert noise.fade(0.0) == 0.0
    assert noise.fade(1.0) == 1.0
    assert noise.fade(0.5) == 0.5


def test_grad_selects_signed_axis_pairs():
    h = np.arange(16)
    x, y, z = 1.0, 10.0, 100.0
    out = noise.grad(h, x, y, z)
    assert out[0] == 11.0      # x + y
    assert out[3] == -11.0     # -x - y
    assert out[4] == 101.0     # x + z
    assert out[8] == 110.0     # y + z
    assert out[12] == 11.0     # y + x
    assert out[14] == 9.0      # y - x


def test_fbm_single_octave_equals_noise():
    xs = np.linspace(-3.3, 9.1, 57)
    ys = np.linspace(4.2, -1.7, 57)
    for persistence in (0.25, 0.5, 0.9):
        assert np.array_equal(pf.fbm(xs, ys, 1, persistence), pf.noise3(xs, ys))
    assert pf.fbm(0.37, 1.91, 1, 0.5) == pf.noise3(0.37, 1.91)


def test_fbm_stays_normalized():
    rng = np.random.default_rng(7)
    xs, ys = rng.uniform(-50, 50, size=(2, 5000))
    for octaves, persistence in [(2, 0.5), (6, 0.5), (8, 0.9), (4, 0.6)]:
        values = pf.fbm(xs, ys, octaves, persistence)
        assert np.all(np.abs(values) <= 1.0001)


def test_fbm_matches_manual_octave_sum():
    x, y = 1.234, 5.678
    expected = (
        pf.noise3(x, y) + pf.noise3(x * 2, y * 2) * 0.5 + pf.noise3(x * 4, y * 4) * 0.25
    ) / 1.75
    assert pf.fbm(x, y, 3, 0.5) == pytest.approx(expected, abs=1e-15)


def test_fbm_rejects_zero_octaves():
    with pytest.raises(pf.InvalidParameterError, match="octaves must be >= 1") as exc:
        pf.fbm(0.5, 0.5, 0, 0.5)
    assert exc.value.field == "octaves"
