import numpy as np

MAX_COUNT = 255

# |z|^2 > 4 is the same test as |z| > 2 without the square root
ESCAPE_RADIUS_SQ = np.float32(4.0)


def escape_count(zx, zy, cx, cy, max_iter: int = MAX_COUNT) -> int:
    """
    Iterate z -> z^2 + c from z0 = zx + i*zy in single precision.

    Returns the index of the first step at which |z|^2 > 4, or max_iter
    if the orbit stays bounded for max_iter steps.
    """
    zx, zy = np.float32(zx), np.float32(zy)
    cx, cy = np.float32(cx), np.float32(cy)
    two = np.float32(2.0)

    for i in range(max_iter):
        if zx * zx + zy * zy > ESCAPE_RADIUS_SQ:
            return i
        zx, zy = zx * zx - zy * zy + cx, zx * zy * two + cy
    return max_iter


def escape_counts(zx, zy, c, max_iter: int = MAX_COUNT) -> np.ndarray:
    """
    Vectorized escape_count over arrays of starting points.

    zx, zy: arrays of the same shape (real and imaginary parts of z0)
    c: complex or (cx, cy)
    Returns a uint8 array of iteration counts with the shape of zx.
    """
    cx, cy = split_c(c)
    zx = np.array(zx, dtype=np.float32)
    zy = np.array(zy, dtype=np.float32)
    if zx.shape != zy.shape:
        raise ValueError(f"zx and zy shapes differ: {zx.shape} vs {zy.shape}")

    counts = np.full(zx.shape, max_iter, dtype=np.uint8)
    active = np.ones(zx.shape, dtype=bool)
    two = np.float32(2.0)

    for i in range(max_iter):
        x = zx[active]
        y = zy[active]

        escaped_now = x * x + y * y > ESCAPE_RADIUS_SQ
        if escaped_now.any():
            idx = np.flatnonzero(active)[escaped_now]
            counts.flat[idx] = i
            active.flat[idx] = False
            x = x[~escaped_now]
            y = y[~escaped_now]

        if not active.any():
            break

        # update the bounded orbits only, escaped ones keep their last value
        zx[active] = x * x - y * y + cx
        zy[active] = x * y * two + cy

    return counts


def split_c(c):
    """
    Julia constant as a float32 (cx, cy) pair.

    c: complex, real number or (cx, cy) pair. Raises ValueError if either part
    is not finite once rounded to float32.
    """
    if isinstance(c, (list, tuple)):
        if len(c) != 2:
            raise ValueError(f"c must be a (re, im) pair, got {c!r}")
        cx, cy = c
    else:
        c = complex(c)
        cx, cy = c.real, c.imag
    with np.errstate(over="ignore"):
        cx, cy = np.float32(cx), np.float32(cy)
    if not (np.isfinite(cx) and np.isfinite(cy)):
        raise ValueError(f"c must be finite in single precision, got {c!r}")
    return cx, cy
