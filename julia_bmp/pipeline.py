"""
Julia set -> BMP -> base64, end to end.

    from julia_bmp.pipeline import generate_base64
    text = generate_base64()            # reference 256x256 image

All stages are pure; the same config always gives the same bytes.
"""

from __future__ import annotations

from typing import Optional

from julia_bmp.bmp import image_to_bmp
from julia_bmp.config import JuliaConfig
from julia_bmp.encoding import to_base64
from julia_bmp.iterators import MAX_COUNT
from julia_bmp.render import render_grid


def render(cfg: Optional[JuliaConfig] = None):
    cfg = cfg or JuliaConfig()
    return render_grid(cfg.width, cfg.height, cfg.c, cfg.max_iter)


def generate_bmp(cfg: Optional[JuliaConfig] = None) -> bytes:
    return image_to_bmp(render(cfg))


def generate_base64(cfg: Optional[JuliaConfig] = None) -> str:
    return to_base64(generate_bmp(cfg))


def julia_base64(width, height, c, max_iter=MAX_COUNT) -> str:
    """Shortcut for generate_base64(JuliaConfig(width, height, c, max_iter))."""
    return generate_base64(JuliaConfig(width=width, height=height, c=c, max_iter=max_iter))
