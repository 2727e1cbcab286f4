"""
Cyclic hue colormaps for phase portraits.

Two layouts are available:
  "standard" -> N=600 hues evenly spaced over [0, 360], S=1.0, L=0.5
  "nist"     -> N=900 hues, re-indexed so that transitions are compressed
                unevenly around the wheel, approximating the DLMF/NIST
                color scheme (http://dlmf.nist.gov/help/vrml/aboutcolor)

Colormaps are (n, 3) float arrays with channels in [0, 1]. They are cached
per (layout, size) and returned read-only.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

import numpy as np
from matplotlib.colors import hsv_to_rgb

STANDARD_SIZE = 600
NIST_SIZE = 900

SATURATION = 1.0
LIGHTNESS = 0.5

_LAYOUT_ALIASES = {
    "standard": "standard",
    "nist": "nist",
    "reference": "nist",
}


def hsl_to_rgb(h, s, l) -> np.ndarray:
    """
    Vectorized HSL -> RGB.

    Args:
        h: hue in degrees (wrapped into [0, 360))
        s: saturation in [0, 1]
        l: lightness in [0, 1]

    Returns an array of shape broadcast(h, s, l) + (3,).
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=np.float64),
        np.asarray(s, dtype=np.float64),
        np.asarray(l, dtype=np.float64),
    )

    # HSL -> HSV, then let matplotlib do the sector arithmetic
    v = l + s * np.minimum(l, 1.0 - l)
    safe_v = np.where(v > 0, v, 1.0)
    sv = np.where(v > 0, 2.0 * (1.0 - l / safe_v), 0.0)

    hsv = np.stack([np.mod(h, 360.0) / 360.0, sv, v], axis=-1)
    return hsv_to_rgb(hsv)


def normalize_layout(ctype: str) -> str:
    key = str(ctype).strip().lower()
    if key not in _LAYOUT_ALIASES:
        raise ValueError(f"Unknown colormap type: {ctype!r} (expected 'standard' or 'nist')")
    return _LAYOUT_ALIASES[key]


def default_size(ctype: str) -> int:
    return NIST_SIZE if normalize_layout(ctype) == "nist" else STANDARD_SIZE


def nist_indices(nc: int) -> np.ndarray:
    """
    0-based indices of the NIST re-indexing of an nc-sample hue ramp.

    Sixths and thirds are fixed boundaries:
        [0, nc/6)        every sample
        [nc/6, nc/2)     every second sample
        [nc/2, 2nc/3)    every sample
        [2nc/3, nc)      every second sample
    """
    sixth, half, third = nc // 6, nc // 2, nc // 3
    return np.concatenate([
        np.arange(0, sixth),
        np.arange(sixth, half, 2),
        np.arange(half, 2 * third),
        np.arange(2 * third, nc, 2),
    ])


@lru_cache(maxsize=None)
def _cached_colormap(layout: str, nc: int) -> np.ndarray:
    hues = np.linspace(0.0, 360.0, nc)
    cm = hsl_to_rgb(hues, SATURATION, LIGHTNESS)
    if layout == "nist":
        cm = cm[nist_indices(nc)]
    cm = np.ascontiguousarray(cm)
    cm.setflags(write=False)
    return cm


def build_colormap(ctype: str = "standard", ncolors: Optional[int] = None) -> np.ndarray:
    """
    Color map for complex phase portraits.

    Args:
        ctype: "standard" or "nist" ("reference" is accepted as an alias)
        ncolors: number of hue samples before re-indexing. None uses the
            layout default (600 standard, 900 nist). Must be a positive
            multiple of 6 so the nist partition falls on whole indices.

    Returns a read-only (n, 3) float array.
    """
    layout = normalize_layout(ctype)
    nc = default_size(layout) if ncolors is None else ncolors
    if isinstance(nc, bool) or not isinstance(nc, (int, np.integer)):
        raise ValueError(f"ncolors must be an integer, got {ncolors!r}")
    if nc <= 0 or nc % 6 != 0:
        raise ValueError(f"ncolors must be a positive multiple of 6, got {nc}")
    return _cached_colormap(layout, int(nc))
