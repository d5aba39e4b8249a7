import numpy as np
import pytest

from julia_bmp.coloring import map_color
from julia_bmp.iterators import escape_count
from julia_bmp.render import (
    check_dimensions,
    pixel_to_plane,
    plane_grid,
    render_grid,
    render_iterations,
)


def test_pixel_to_plane_corners():
    """Top-left is (-1.5, 1.5), bottom-right is (1.5, -1.5), exactly."""
    assert pixel_to_plane(0, 0, 3, 3) == (-1.5, 1.5)
    assert pixel_to_plane(2, 2, 3, 3) == (1.5, -1.5)
    assert pixel_to_plane(1, 1, 3, 3) == (0.0, 0.0)


def test_plane_grid_orientation():
    zx, zy = plane_grid(4, 3)
    assert zx.shape == zy.shape == (3, 4)
    assert zx.dtype == zy.dtype == np.float32
    # real part grows left to right, imaginary part shrinks top to bottom
    np.testing.assert_array_equal(zx[0], zx[-1])
    assert np.all(np.diff(zx[0]) > 0)
    assert np.all(np.diff(zy[:, 0]) < 0)
    assert zy[0, 0] == 1.5 and zy[-1, 0] == -1.5


def test_render_iterations_matches_pixelwise():
    width, height, c = 7, 4, complex(0.285, 0.01)
    iters = render_iterations(width, height, c)

    for y in range(height):
        for x in range(width):
            re, im = pixel_to_plane(x, y, width, height)
            assert iters[y, x] == escape_count(re, im, c.real, c.imag)


def test_render_grid_shape_and_colors():
    grid = render_grid(5, 3, complex(-0.8, 0.156))
    assert grid.shape == (3, 5, 3)
    assert grid.dtype == np.uint8

    iters = render_iterations(5, 3, complex(-0.8, 0.156))
    for y in range(3):
        for x in range(5):
            assert tuple(grid[y, x]) == map_color(iters[y, x])


def test_render_grid_is_read_only():
    grid = render_grid(3, 3, 0j)
    with pytest.raises(ValueError):
        grid[0, 0] = (1, 2, 3)


def test_render_is_deterministic():
    a = render_grid(16, 9, complex(-0.8, 0.156))
    b = render_grid(16, 9, complex(-0.8, 0.156))
    np.testing.assert_array_equal(a, b)


@pytest.mark.parametrize("width, height, max_iter", [
    (1, 10, 255),
    (10, 1, 255),
    (0, 10, 255),
    (10, 10, 0),
    (10, 10, 256),
    (2.5, 10, 255),
])
def test_check_dimensions_rejects(width, height, max_iter):
    with pytest.raises(ValueError):
        check_dimensions(width, height, max_iter)


def test_render_grid_rejects_degenerate_size():
    with pytest.raises(ValueError, match="width"):
        render_grid(1, 5, 0j)
    with pytest.raises(ValueError, match="height"):
        render_grid(5, 1, 0j)


@pytest.mark.parametrize("c", [
    complex(float("nan"), 0.0),
    complex(0.0, float("-inf")),
    complex(1e39, 0.0),
])
def test_render_grid_rejects_non_finite_c(c):
    with pytest.raises(ValueError, match="finite"):
        render_grid(3, 3, c)


def test_render_grid_accepts_real_c():
    np.testing.assert_array_equal(render_grid(3, 3, 0), render_grid(3, 3, 0j))
    np.testing.assert_array_equal(
        render_grid(4, 4, np.complex64(-0.75)), render_grid(4, 4, (-0.75, 0.0))
    )
