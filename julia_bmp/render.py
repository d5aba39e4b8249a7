import numpy as np

from julia_bmp.coloring import color_by_iters
from julia_bmp.iterators import MAX_COUNT, escape_counts, split_c

# the sampled window is [-1.5, 1.5] on both axes
PLANE_SPAN = np.float32(3.0)
PLANE_HALF = np.float32(1.5)


def check_dimensions(width, height, max_iter=MAX_COUNT):
    """Reject sizes and iteration bounds the sampler cannot handle."""
    if int(width) != width or width <= 1:
        raise ValueError(f"width must be an integer > 1, got {width!r}")
    if int(height) != height or height <= 1:
        raise ValueError(f"height must be an integer > 1, got {height!r}")
    if int(max_iter) != max_iter or not 1 <= max_iter <= MAX_COUNT:
        raise ValueError(f"max_iter must be in [1, {MAX_COUNT}], got {max_iter!r}")


def pixel_to_plane(x, y, width, height):
    """
    Complex-plane coordinate of pixel (x, y), row 0 at the top.

    Computed in float32 exactly as the grid sampler does it.
    """
    re = np.float32(x) / np.float32(width - 1) * PLANE_SPAN - PLANE_HALF
    im = PLANE_HALF - np.float32(y) / np.float32(height - 1) * PLANE_SPAN
    return re, im


def plane_grid(width, height):
    """Return (zx, zy) float32 arrays of shape (height, width)."""
    xs = np.arange(width, dtype=np.float32)
    ys = np.arange(height, dtype=np.float32)
    re, im = pixel_to_plane(xs, ys, width, height)
    zx, zy = np.meshgrid(re, im)
    return zx, zy


def render_iterations(width, height, c, max_iter=MAX_COUNT):
    """Escape counts for every pixel, uint8 of shape (height, width)."""
    check_dimensions(width, height, max_iter)
    c = split_c(c)
    zx, zy = plane_grid(width, height)
    return escape_counts(zx, zy, c, max_iter)


def render_grid(width=256, height=256, c=complex(-0.8, 0.156), max_iter=MAX_COUNT):
    """
    Render a Julia set into an RGB pixel grid.

    Returns a read-only uint8 array of shape (height, width, 3), row 0 at the
    top of the plane (Im = 1.5).
    """
    iters = render_iterations(width, height, c, max_iter)
    pixels = color_by_iters(iters, max_iter)
    pixels.flags.writeable = False
    return pixels
