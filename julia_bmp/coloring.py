# julia_bmp/coloring.py
from typing import NamedTuple

import numpy as np

from julia_bmp.iterators import MAX_COUNT


class Color(NamedTuple):
    r: int
    g: int
    b: int


_ONE = np.float32(1.0)
_TWO = np.float32(2.0)
_SIX = np.float32(6.0)
_HALF = np.float32(0.5)
_SCALE = np.float32(256.0)
_TOP = np.float32(255.0)


def clamp_unit(v):
    """Clamp to [0, 1]. NaN and anything not below 1 map to 1."""
    v = np.float32(v)
    if v < 0:
        return np.float32(0.0)
    if not v < _ONE:
        return _ONE
    return v


def to_channel(v) -> int:
    """Scale a [0, 1] intensity to a byte, truncating the fraction."""
    v = clamp_unit(v) * _SCALE
    if v > _TOP:
        v = _TOP
    return int(v)


def map_color(n: int, max_iter: int = MAX_COUNT) -> Color:
    """
    Banded gradient used for the escape-time palette.

    red ramps linearly, green ramps six times faster and clips,
    blue is a triangle peaking at the midpoint.
    """
    v = np.float32(n) / np.float32(max_iter)
    blue = _TWO - _TWO * v if v > _HALF else _TWO * v
    return Color(to_channel(v), to_channel(v * _SIX), to_channel(blue))


def _channels(src):
    src = np.where(src < 0, np.float32(0.0), src)
    src = np.where(src < _ONE, src, _ONE)
    return np.minimum(src * _SCALE, _TOP).astype(np.uint8)


def color_by_iters(iters, max_iter: int = MAX_COUNT) -> np.ndarray:
    """
    Map an array of iteration counts to RGB with the same gradient as map_color.
    Returns uint8 with shape iters.shape + (3,).
    """
    v = np.asarray(iters).astype(np.float32) / np.float32(max_iter)
    blue = np.where(v > _HALF, _TWO - _TWO * v, _TWO * v)
    rgb = np.stack([_channels(v), _channels(v * _SIX), _channels(blue)], axis=-1)
    return rgb
