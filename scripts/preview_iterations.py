import argparse
import os
import sys
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from julia_bmp.config import JuliaConfig, load_config  # noqa: E402
from julia_bmp.render import PLANE_HALF, render_iterations  # noqa: E402


def main(argv=None):
    ## ----------------------------------------------------
    ## 1. Parameters & Setup
    ## ----------------------------------------------------

    parser = argparse.ArgumentParser(description="Plot escape counts of a Julia set")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--outdir", type=str, default="figures")
    args = parser.parse_args(argv)

    cfg = load_config(args.config) if args.config else JuliaConfig()

    timestamp = time.strftime("%Y%m%d_%H%M%S")
    output_figure = os.path.join(
        args.outdir, f"julia_iters_{cfg.c.real}_{cfg.c.imag}_{timestamp}.png"
    )
    os.makedirs(args.outdir, exist_ok=True)

    print("--- Julia Escape-Count Preview ---")
    print(f"C = {cfg.c} | Resolution: {cfg.width}x{cfg.height} | Max Iterations: {cfg.max_iter}")

    ## ----------------------------------------------------
    ## 2. Escape counts
    ## ----------------------------------------------------

    start_time = time.time()
    iters = render_iterations(cfg.width, cfg.height, cfg.c, cfg.max_iter)
    end_time = time.time()
    print(f"Calculation finished in {end_time - start_time:.2f} seconds.")

    ## ----------------------------------------------------
    ## 3. Visualization and Saving
    ## ----------------------------------------------------

    half = float(PLANE_HALF)
    plt.figure(figsize=(8, 8))
    # row 0 is Im = +1.5, so the default 'upper' origin matches the plane
    plt.imshow(iters, cmap="magma", extent=[-half, half, -half, half])
    plt.title(f"Julia Set (C={cfg.c}) - {end_time - start_time:.2f}s")
    plt.xlabel("Re(z0)")
    plt.ylabel("Im(z0)")
    plt.colorbar(label=f"Iterations to Escape (MAX={cfg.max_iter})")
    plt.gca().set_aspect("equal", adjustable="box")

    plt.savefig(output_figure, dpi=150, bbox_inches="tight")
    plt.close()
    print(f"\nImage saved successfully to {output_figure}")
    return output_figure


if __name__ == "__main__":
    main()
