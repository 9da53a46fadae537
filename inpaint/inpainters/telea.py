"""Telea's fast marching inpainting.

Fills the masked region from its boundary inward, each pixel taking a
weighted average of the known pixels within ``radius``. Works on images of
any channel count with integer (up to 32-bit) or float samples.
"""

import numpy as np

from inpaint.adapters import inpaint_array
from inpaint.fmm.telea import DEFAULT_RADIUS, check_radius
from inpaint.inpainters.base import Inpainter


class TeleaInpainter(Inpainter):
    """Fast marching inpainter."""

    def __init__(self, radius: int = DEFAULT_RADIUS):
        """Initialize the Telea inpainter.

        Args:
            radius: Radius of the neighborhood for inpainting. Larger values
                consider more surrounding pixels but are slower.

        Raises:
            ShapeError: If radius is not an integer of at least 1.
        """
        check_radius(radius)
        self._radius = int(radius)

    @property
    def name(self) -> str:
        return f"telea(radius={self._radius})"

    @property
    def radius(self) -> int:
        return self._radius

    def _inpaint(self, image: np.ndarray, mask: np.ndarray) -> np.ndarray:
        return inpaint_array(image, mask, self._radius)
