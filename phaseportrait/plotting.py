"""
Matplotlib helpers for showing rendered portraits on the complex plane.

Rendered images are top row first (highest imaginary part on top), so they
are drawn with origin='upper' and an extent of [xmin, xmax, ymin, ymax].
"""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from phaseportrait.encoder import PortraitType
from phaseportrait.render import portrait, to_uint8


def plot_portrait(img: np.ndarray, xlim: Sequence[float], ylim: Sequence[float], ax=None, **kwargs):
    """Draw a rendered portrait on ax (a new figure if None) and return ax."""
    if ax is None:
        _, ax = plt.subplots()

    kwargs.setdefault("interpolation", "nearest")
    kwargs.setdefault("origin", "upper")
    kwargs.setdefault("aspect", "equal")
    ax.imshow(to_uint8(img), extent=[xlim[0], xlim[1], ylim[0], ylim[1]], **kwargs)
    ax.set_xlim(xlim[0], xlim[1])
    ax.set_ylim(ylim[0], ylim[1])
    ax.set_xlabel("Re(z)")
    ax.set_ylabel("Im(z)")
    return ax


def phaseplot(
    fval,
    xlim: Sequence[float],
    ylim: Sequence[float],
    ptype=PortraitType.PROPER,
    ax=None,
    config=None,
    **kwargs,
):
    """
    Render fval and plot it over [xlim] x [ylim].

    fval must be sampled with row 0 at ylim[0] and column 0 at xlim[0],
    i.e. fval[j, i] = f(x[i] + 1j * y[j]).
    """
    img = portrait(fval, ptype, config=config)
    return plot_portrait(img, xlim, ylim, ax=ax, **kwargs)
