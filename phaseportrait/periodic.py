"""
Periodic helpers used to turn phase and log-modulus into colors.

- step_index: integer step function, one period -> buckets 1..nmax
- sawtooth:   linear ramp on each period, mapped onto [lo, hi]

Both work elementwise on scalars or numpy arrays. The period must be
nonzero; it is not checked here.
"""

import numpy as np


def step_index(x, nmax: int, period: float = 1.0) -> np.ndarray:
    """
    Integer step function with the given period such that [0, period) -> [1, nmax].

    The fractional part is floor based, so negative inputs wrap the same
    way positive ones do. Non-finite inputs land in bucket 1.
    """
    with np.errstate(invalid="ignore"):
        y = np.asarray(x, dtype=np.float64) / period
        y = y - np.floor(y)
    y = np.where(np.isfinite(y), y, 0.0)

    idx = np.floor(nmax * y).astype(np.int64) + 1
    # y can round up to exactly 1.0 for tiny negative x
    return np.clip(idx, 1, nmax)


def sawtooth(x, period: float, lo: float, hi: float) -> np.ndarray:
    """Sawtooth function over the reals with period `period` onto [lo, hi]."""
    t = np.asarray(x, dtype=np.float64) / period
    t = t - np.floor(t)
    return lo + (hi - lo) * t
