import argparse
import os
import sys
import time
from pathlib import Path

# Ensure repository root is on sys.path so `from julia_bmp...` works when running
# this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import yaml

from julia_bmp.bmp import image_to_bmp
from julia_bmp.config import JuliaConfig, load_config
from julia_bmp.encoding import to_base64
from julia_bmp.pipeline import render
from julia_bmp.utils import parse_complex


def log(msg):
    # stdout may carry the encoded image
    print(msg, file=sys.stderr)


def build_config(args, parser):
    try:
        overrides = {
            "width": args.width,
            "height": args.height,
            "c": parse_complex(args.c) if args.c is not None else None,
            "max_iter": args.max_iter,
        }
        if args.config:
            return load_config(args.config, **overrides)
        return JuliaConfig(**{k: v for k, v in overrides.items() if v is not None})
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        parser.error(str(e))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a Julia set to a base64-encoded BMP"
    )
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file with width/height/c/max_iter")
    parser.add_argument("--c", type=str, default=None,
                        help="Julia constant, e.g. --c=-0.8+0.156j or --c=-0.8,0.156 "
                             "(use the = form for negative values)")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--max_iter", type=int, default=None)
    parser.add_argument("--format", type=str, default="b64",
                        choices=["b64", "bmp", "png"])
    parser.add_argument("--outfile", type=str, default=None,
                        help="Output path (default: base64 text on stdout)")

    args = parser.parse_args(argv)
    if args.outfile is None and args.format != "b64":
        parser.error(f"--format {args.format} needs --outfile")

    cfg = build_config(args, parser)
    log(f"[run] c={cfg.c}, {cfg.width}x{cfg.height}, max_iter={cfg.max_iter}")

    start_time = time.time()
    pixels = render(cfg)
    log(f"[run] rendered in {time.time() - start_time:.2f}s")

    if args.format == "png":
        from PIL import Image
        out_path = Path(args.outfile)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(pixels).save(out_path)
        log(f"[run] saved {out_path}")
        return 0

    data = image_to_bmp(pixels)
    if args.format == "bmp":
        out_path = Path(args.outfile)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(data)
        log(f"[run] saved {out_path} ({len(data)} bytes)")
        return 0

    text = to_base64(data)
    if args.outfile is None:
        sys.stdout.write(text + "\n")
    else:
        out_path = Path(args.outfile)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text)
        log(f"[run] saved {out_path} ({len(text)} chars)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
