from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from julia_bmp.iterators import MAX_COUNT, split_c
from julia_bmp.render import check_dimensions
from julia_bmp.utils import parse_complex


@dataclass
class JuliaConfig:
    width: int = 256
    height: int = 256
    # Julia constant, the reference image uses -0.8 + 0.156i
    c: complex = complex(-0.8, 0.156)
    max_iter: int = MAX_COUNT

    def __post_init__(self):
        self.c = as_complex(self.c)
        split_c(self.c)
        check_dimensions(self.width, self.height, self.max_iter)
        self.width = int(self.width)
        self.height = int(self.height)
        self.max_iter = int(self.max_iter)


def as_complex(c) -> complex:
    """Accept a complex, a real, an (re, im) pair or a string."""
    if isinstance(c, str):
        return parse_complex(c)
    if isinstance(c, (list, tuple)):
        if len(c) != 2:
            raise ValueError(f"c must be a (re, im) pair, got {c!r}")
        return complex(float(c[0]), float(c[1]))
    return complex(c)


def load_config(path: str | Path, **overrides) -> JuliaConfig:
    """
    Build a JuliaConfig from a YAML mapping, e.g.

        width: 256
        height: 256
        c: "-0.8+0.156j"     # or [-0.8, 0.156]
        max_iter: 255

    Keyword overrides that are not None win over the file.
    """
    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    known = {f.name for f in fields(JuliaConfig)}
    unknown = set(config) - known
    if unknown:
        raise ValueError(f"{path}: unknown config keys {sorted(unknown)}")

    config.update({k: v for k, v in overrides.items() if v is not None})
    return JuliaConfig(**config)
