from phaseportrait.colormap import build_colormap
from phaseportrait.encoder import PhaseEncoding, PortraitConfig, PortraitType, encode, setup_phase
from phaseportrait.periodic import sawtooth, step_index
from phaseportrait.render import phase_to_image, portrait, render, to_uint8

__all__ = [
    "PhaseEncoding",
    "PortraitConfig",
    "PortraitType",
    "build_colormap",
    "encode",
    "phase_to_image",
    "portrait",
    "render",
    "sawtooth",
    "setup_phase",
    "step_index",
    "to_uint8",
]
