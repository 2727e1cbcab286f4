"""
Phase / modulus encoding of a complex grid.

Given fval (2D complex array) this computes:
- farg:       normalized phase (angle(-z) + pi) / 2pi in [0, 1]
- nphase:     1-based colormap index per sample
- brightness: optional multiplier, depends on the portrait type
- degenerate: samples whose phase is undefined (NaN input)

Portrait types:
  PROPER    -> smooth phase coloring, no brightness
  CGRID     -> conformal grid, phase ramp x log-modulus ramp on [lowb, 1]
  STEPMOD   -> stepped modulus, log-modulus ramp on [0.75, 1]
  STEPPHASE -> stepped phase, phase ramp on [0.75, 1]

Zero or infinite moduli give NaN brightness. That is left to degrade the
single pixel, it never aborts the whole render.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from phaseportrait.colormap import build_colormap, normalize_layout
from phaseportrait.periodic import sawtooth, step_index

BRIGHTEN = 0.1
PHASE_RESOLUTION = 20
STEP_FLOOR = 0.75


class PortraitType(Enum):
    PROPER = "proper"
    CGRID = "cgrid"
    STEPMOD = "stepmod"
    STEPPHASE = "stepphase"

    @classmethod
    def coerce(cls, value) -> "PortraitType":
        """Accept a PortraitType, its value or one of the long names."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for sep in ("_", "-", " "):
                key = key.replace(sep, "")
            key = _TYPE_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(
            f"Unknown portrait type: {value!r} "
            f"(expected one of {[m.value for m in cls]})"
        )


_TYPE_ALIASES = {
    "conformalgrid": "cgrid",
    "steppedmodulus": "stepmod",
    "steppedphase": "stepphase",
}


@dataclass
class PortraitConfig:
    ctype: str = "standard"
    pres: int = PHASE_RESOLUTION  # number of phase/modulus steps per period
    brighten: float = BRIGHTEN
    ncolors: Optional[int] = None  # None => layout default (600 / 900)

    def validate(self) -> "PortraitConfig":
        normalize_layout(self.ctype)
        if isinstance(self.pres, bool) or not isinstance(self.pres, (int, np.integer)):
            raise ValueError(f"pres must be a positive integer, got {self.pres!r}")
        if self.pres <= 0:
            raise ValueError(f"pres must be a positive integer, got {self.pres}")
        if not 0.0 <= float(self.brighten) <= 1.0:
            raise ValueError(f"brighten must lie in [0, 1], got {self.brighten}")
        if self.ncolors is not None and (self.ncolors <= 0 or self.ncolors % 6 != 0):
            raise ValueError(f"ncolors must be a positive multiple of 6, got {self.ncolors}")
        return self


@dataclass
class PhaseEncoding:
    farg: np.ndarray
    nphase: np.ndarray
    colormap: np.ndarray
    brightness: Optional[np.ndarray] = None
    degenerate: Optional[np.ndarray] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nphase.shape


def as_grid(fval) -> np.ndarray:
    """View fval as a non-empty 2D complex128 array (no copy when possible)."""
    grid = np.asarray(fval, dtype=np.complex128)
    if grid.ndim != 2:
        raise ValueError(f"Expected a 2D complex grid, got shape {grid.shape}")
    if grid.size == 0:
        raise ValueError("Complex grid is empty")
    return grid


def normalized_phase(fval: np.ndarray) -> np.ndarray:
    # angle(-z) + pi puts the first color on the positive real axis
    return (np.angle(-fval) + np.pi) / (2 * np.pi)


def log_modulus(fval: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore"):
        return np.log(np.abs(fval))


def setup_phase(fval, ctype: str = "standard", ncolors: Optional[int] = None):
    """Shared first step of every portrait: (farg, nphase, colormap)."""
    fval = as_grid(fval)
    cm = build_colormap(ctype, ncolors)
    farg = normalized_phase(fval)
    nphase = step_index(farg, len(cm))
    return farg, nphase, cm


def _cgrid_brightness(fval, farg, config: PortraitConfig) -> np.ndarray:
    lowb = np.sqrt(STEP_FLOOR ** 2 * (1.0 - config.brighten) + config.brighten)
    return (sawtooth(farg, 1.0 / config.pres, lowb, 1.0)
            * sawtooth(log_modulus(fval), 2 * np.pi / config.pres, lowb, 1.0))


def _stepmod_brightness(fval, farg, config: PortraitConfig) -> np.ndarray:
    return sawtooth(log_modulus(fval), 2 * np.pi / config.pres, STEP_FLOOR, 1.0)


def _stepphase_brightness(fval, farg, config: PortraitConfig) -> np.ndarray:
    return sawtooth(farg, 1.0 / config.pres, STEP_FLOOR, 1.0)


BrightnessFn = Callable[[np.ndarray, np.ndarray, PortraitConfig], np.ndarray]

BRIGHTNESS: Dict[PortraitType, Optional[BrightnessFn]] = {
    PortraitType.PROPER: None,
    PortraitType.CGRID: _cgrid_brightness,
    PortraitType.STEPMOD: _stepmod_brightness,
    PortraitType.STEPPHASE: _stepphase_brightness,
}


def encode(fval, ptype=PortraitType.PROPER, config: Optional[PortraitConfig] = None) -> PhaseEncoding:
    """
    Encode a complex grid for the given portrait type.

    Raises ValueError for an unknown portrait type, an invalid config or a
    grid that is not a non-empty 2D array.
    """
    ptype = PortraitType.coerce(ptype)
    config = (config or PortraitConfig()).validate()
    fval = as_grid(fval)

    farg, nphase, cm = setup_phase(fval, config.ctype, config.ncolors)
    degenerate = ~np.isfinite(farg)

    brightness = None
    brightness_fn = BRIGHTNESS[ptype]
    if brightness_fn is not None:
        with np.errstate(invalid="ignore", divide="ignore"):
            brightness = brightness_fn(fval, farg, config)
        assert brightness.shape == nphase.shape

    return PhaseEncoding(
        farg=farg,
        nphase=nphase,
        colormap=cm,
        brightness=brightness,
        degenerate=degenerate if degenerate.any() else None,
    )
