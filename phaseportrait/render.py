import dataclasses

import numpy as np

from phaseportrait.encoder import PortraitConfig, PortraitType, encode

CONFIG_FIELDS = frozenset(f.name for f in dataclasses.fields(PortraitConfig))

# long option names accepted by render()
OPTION_ALIASES = {
    "colormapLayout": "ctype",
    "colormap_layout": "ctype",
    "phaseResolution": "pres",
    "phase_resolution": "pres",
}


def phase_to_image(nphase, cm, brightness=None, degenerate=None):
    """
    Write colormap colors into a new (m, n, 3) float image.

    Row i of the index array becomes row m-1-i of the image, so increasing
    imaginary part points up once the image is shown top row first.
    Colors are scaled by brightness when given; degenerate pixels are NaN.
    """
    nphase = np.asarray(nphase)
    assert nphase.ndim == 2

    # fancy indexing copies, the colormap is never aliased
    img = np.asarray(cm, dtype=np.float64)[nphase - 1]

    if brightness is not None:
        brightness = np.asarray(brightness, dtype=np.float64)
        assert brightness.shape == nphase.shape
        img = img * brightness[..., None]

    if degenerate is not None:
        assert degenerate.shape == nphase.shape
        img[degenerate] = np.nan

    return np.ascontiguousarray(img[::-1])


def portrait(fval, ptype=PortraitType.PROPER, *, config=None, **overrides):
    """
    Build a phase portrait over a given complex grid.

    ptype selects the portrait:
      "proper"    -> a proper phase portrait (default)
      "cgrid"     -> a conformal grid
      "stepphase" -> a stepped phase plot
      "stepmod"   -> a stepped modulus plot

    Keyword overrides go onto the config:
      ctype    -> "standard" (HSL ramp, H in [0,360], S=1, L=0.5) or "nist"
      pres     -> phase step resolution, default 20
      brighten -> floor used by the conformal grid, default 0.1
      ncolors  -> colormap samples, default 600 / 900

    Returns an (m, n, 3) float RGB image, top row first.
    """
    config = config or PortraitConfig()
    if overrides:
        unknown = sorted(set(overrides) - CONFIG_FIELDS)
        if unknown:
            raise ValueError(f"Unknown portrait option(s): {unknown} (expected {sorted(CONFIG_FIELDS)})")
        config = dataclasses.replace(config, **overrides)

    enc = encode(fval, ptype, config)
    return phase_to_image(enc.nphase, enc.colormap, enc.brightness, enc.degenerate)


def render(grid, variant=PortraitType.PROPER, options=None):
    """portrait() with an options mapping or PortraitConfig instead of keywords."""
    if options is None or isinstance(options, PortraitConfig):
        return portrait(grid, variant, config=options)
    overrides = {OPTION_ALIASES.get(key, key): value for key, value in dict(options).items()}
    return portrait(grid, variant, **overrides)


def to_uint8(img, nan_color=(0, 0, 0)):
    """Map a float portrait to 8-bit RGB. Non-finite pixels get nan_color."""
    img = np.asarray(img, dtype=np.float64)
    bad = ~np.all(np.isfinite(img), axis=-1)
    rgb = (255 * np.nan_to_num(img, nan=0.0, posinf=1.0, neginf=0.0)).clip(0, 255).astype(np.uint8)
    rgb[bad] = nan_color
    return rgb
