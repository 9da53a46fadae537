"""Fast marching core: flags, narrow band, Eikonal solver and reconstruction."""

from inpaint.fmm.eikonal import eikonal_at, solve_eikonal
from inpaint.fmm.exterior import march_exterior
from inpaint.fmm.flags import MAX, ExteriorRole, Flag, classify_mask, exterior_roles
from inpaint.fmm.narrow_band import NarrowBand
from inpaint.fmm.reconstruct import ReconstructionKernel, pixel_gradient
from inpaint.fmm.telea import DEFAULT_RADIUS, MarchingState, telea_inpaint

__all__ = [
    "MAX",
    "DEFAULT_RADIUS",
    "Flag",
    "ExteriorRole",
    "NarrowBand",
    "MarchingState",
    "ReconstructionKernel",
    "classify_mask",
    "exterior_roles",
    "solve_eikonal",
    "eikonal_at",
    "march_exterior",
    "pixel_gradient",
    "telea_inpaint",
]
