"""Telea fast marching image inpainting."""

from inpaint.adapters import inpaint_array, inpaint_pil
from inpaint.errors import (
    CastError,
    DimensionMismatchError,
    InpaintError,
    NoDataError,
    ShapeError,
    UnresolvedPixelsError,
)
from inpaint.fmm.telea import DEFAULT_RADIUS, MarchingState, telea_inpaint
from inpaint.inpainters import Inpainter, TeleaInpainter

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RADIUS",
    "MarchingState",
    "telea_inpaint",
    "inpaint_array",
    "inpaint_pil",
    "Inpainter",
    "TeleaInpainter",
    "InpaintError",
    "DimensionMismatchError",
    "ShapeError",
    "CastError",
    "NoDataError",
    "UnresolvedPixelsError",
]
