import numpy as np
import pytest

from julia_bmp.coloring import Color, clamp_unit, color_by_iters, map_color, to_channel
from julia_bmp.iterators import MAX_COUNT

# reference palette entries
PALETTE_SAMPLES = [
    (0, (0, 0, 0)),
    (1, (1, 6, 2)),
    (64, (64, 255, 128)),
    (127, (127, 255, 254)),
    (128, (128, 255, 254)),
    (200, (200, 255, 110)),
    (255, (255, 255, 0)),
]


@pytest.mark.parametrize("n, rgb", PALETTE_SAMPLES)
def test_map_color_reference_values(n, rgb):
    assert map_color(n) == Color(*rgb)


def test_map_color_endpoints():
    """n=0 is black; n=max saturates red and green with blue back at 0."""
    assert map_color(0) == Color(0, 0, 0)
    assert map_color(MAX_COUNT) == Color(255, 255, 0)


def test_map_color_all_counts_in_range():
    for n in range(MAX_COUNT + 1):
        color = map_color(n)
        assert all(0 <= ch <= 255 for ch in color)
        assert all(isinstance(ch, int) for ch in color)


def test_to_channel_truncates():
    # 0.5 * 256 = 128.0, 0.499 * 256 = 127.74 -> 127
    assert to_channel(0.5) == 128
    assert to_channel(0.499) == 127
    # exactly 1.0 scales to 256 and is clipped
    assert to_channel(1.0) == 255


def test_clamp_unit():
    assert clamp_unit(-0.25) == 0.0
    assert clamp_unit(0.25) == np.float32(0.25)
    assert clamp_unit(6.0) == 1.0
    assert clamp_unit(float("nan")) == 1.0


def test_color_by_iters_matches_map_color():
    iters = np.arange(MAX_COUNT + 1, dtype=np.uint8)
    rgb = color_by_iters(iters)

    assert rgb.shape == (MAX_COUNT + 1, 3)
    assert rgb.dtype == np.uint8
    expected = np.array([map_color(n) for n in range(MAX_COUNT + 1)], dtype=np.uint8)
    np.testing.assert_array_equal(rgb, expected)


def test_color_by_iters_other_bound():
    iters = np.array([[0, 5], [10, 20]])
    rgb = color_by_iters(iters, max_iter=20)
    assert rgb.shape == (2, 2, 3)
    np.testing.assert_array_equal(rgb[1, 1], map_color(20, max_iter=20))
    np.testing.assert_array_equal(rgb[0, 1], map_color(5, max_iter=20))
