import argparse
import os
import sys
from pathlib import Path

import numpy as np

# Ensure repository root is on sys.path so `from phaseportrait...` works when
# running this script directly (e.g. `python scripts/make_portrait.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from phaseportrait.encoder import PortraitConfig, PortraitType
from phaseportrait.render import portrait, to_uint8
from phaseportrait.utils import bounded_size, parse_complex

MAX_SIZE = 8192

FUNCTIONS = {
    "identity": lambda z, c: z,
    "quadratic": lambda z, c: z * z + c,
    "mobius": lambda z, c: (z - c) / (z + c),
    "exp": lambda z, c: np.exp(z) + c,
    "sin": lambda z, c: np.sin(z) + c,
}


def sample_grid(func, c, xmin, xmax, ymin, ymax, width, height):
    """fval[j, i] = func(x[i] + 1j*y[j]) with row 0 at ymin."""
    xs = np.linspace(xmin, xmax, width)
    ys = np.linspace(ymin, ymax, height)
    zz = xs[None, :] + 1j * ys[:, None]
    with np.errstate(all="ignore"):
        return func(zz, c)


def main():
    parser = argparse.ArgumentParser(description="Render a phase portrait of a complex function")
    parser.add_argument("--func", type=str, default="quadratic", choices=sorted(FUNCTIONS))
    parser.add_argument("--c", type=str, default="0")
    parser.add_argument("--type", dest="ptype", type=str, default="proper",
                        choices=[t.value for t in PortraitType])
    parser.add_argument("--ctype", type=str, default="standard", choices=["standard", "nist"])
    parser.add_argument("--pres", type=int, default=20)
    parser.add_argument("--xmin", type=float, default=-2.0)
    parser.add_argument("--xmax", type=float, default=2.0)
    parser.add_argument("--ymin", type=float, default=-2.0)
    parser.add_argument("--ymax", type=float, default=2.0)
    parser.add_argument("--width", type=int, default=500)
    parser.add_argument("--height", type=int, default=500)
    parser.add_argument("--axes", action="store_true",
                        help="Save a matplotlib figure with Re/Im axes instead of a bare image")
    parser.add_argument("--outfile", type=str, required=True)

    args = parser.parse_args()

    c = parse_complex(args.c)
    width = bounded_size(args.width, MAX_SIZE)
    height = bounded_size(args.height, MAX_SIZE)
    out_path = Path(args.outfile)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"[run] func={args.func}, c={c}, type={args.ptype}, ctype={args.ctype}, "
          f"{width}x{height}, saving to {out_path}")

    fval = sample_grid(FUNCTIONS[args.func], c, args.xmin, args.xmax,
                       args.ymin, args.ymax, width, height)
    config = PortraitConfig(ctype=args.ctype, pres=args.pres)
    img = portrait(fval, args.ptype, config=config)

    n_bad = int(np.count_nonzero(~np.isfinite(img).all(axis=-1)))
    if n_bad:
        print(f"[run] {n_bad} degenerate pixel(s) drawn black")

    if args.axes:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from phaseportrait.plotting import plot_portrait

        ax = plot_portrait(img, (args.xmin, args.xmax), (args.ymin, args.ymax))
        ax.set_title(f"{args.func}  [{args.ptype}]")
        ax.figure.savefig(out_path, dpi=150, bbox_inches="tight")
        plt.close(ax.figure)
    else:
        from PIL import Image
        Image.fromarray(to_uint8(img)).save(out_path)

    print("[run] done.")


if __name__ == "__main__":
    main()
