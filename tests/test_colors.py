"""Tests for color parsing and blending helpers."""
import numpy as np
import pytest

from pbrforge import colors


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#ff0000", (255, 0, 0)),
        ("00ff00", (0, 255, 0)),
        ("#0000FF", (0, 0, 255)),
        ("#8B5E3C", (139, 94, 60)),
    ],
)
def test_hex_to_rgb_parses_six_digit_colors(text, expected):
    assert colors.hex_to_rgb(text) == expected


@pytest.mark.parametrize("text", ["not-a-color", "", "#fff", "#12345", "#1234567", "##123456", "#gg0000", "#123456\n", None, 0x123456])
def test_hex_to_rgb_falls_back_to_gray(text):
    assert colors.hex_to_rgb(text) == (128, 128, 128)


def test_rgb_to_hex_round_trip_and_clamp():
    assert colors.rgb_to_hex((139, 94, 60)) == "#8b5e3c"
    assert colors.rgb_to_hex((300, -5, 16)) == "#ff0010"


def test_lerp_color_endpoints_and_rounding():
    c1, c2 = (0, 100, 200), (10, 0, 255)
    assert colors.lerp_color(c1, c2, 0.0).tolist() == [0, 100, 200]
    assert colors.lerp_color(c1, c2, 1.0).tolist() == [10, 0, 255]
    # 0 + 10*0.25 = 2.5 rounds up; 100 - 25 = 75; 200 + 13.75 = 213.75 -> 214
    assert colors.lerp_color(c1, c2, 0.25).tolist() == [3, 75, 214]


def test_lerp_color_rounds_negative_ties_up():
    assert colors.lerp_color((0, 0, 0), (-5, 0, 0), 0.5).tolist() == [-2, 0, 0]


def test_lerp_color_extrapolates_unclamped():
    out = colors.lerp_color((100, 100, 100), (200, 50, 100), 2.0)
    assert out.tolist() == [300, 0, 100]
    out = colors.lerp_color((100, 100, 100), (200, 50, 100), -1.0)
    assert out.tolist() == [0, 150, 100]


def test_lerp_color_broadcasts_over_weight_grid():
    t = np.linspace(0.0, 1.0, 12).reshape(3, 4)
    out = colors.lerp_color((0, 0, 0), (255, 255, 255), t)
    assert out.shape == (3, 4, 3)
    assert out[0, 0].tolist() == [0, 0, 0]
    assert out[-1, -1].tolist() == [255, 255, 255]


def test_clamp_scalar_and_array():
    assert colors.clamp(-3) == 0
    assert colors.clamp(300) == 255
    assert colors.clamp(0.5, 0.0, 1.0) == 0.5
    assert colors.clamp(np.array([-1.0, 12.5, 999.0])).tolist() == [0.0, 12.5, 255.0]
