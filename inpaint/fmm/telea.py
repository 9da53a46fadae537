"""Telea (2004) inpainting driven by the fast marching method.

The mask interior is filled from its boundary inward. Pixels are visited in
increasing order of their distance to the boundary (ties broken by row, then
column); each newly reached pixel is reconstructed as a weighted average of
the already filled pixels around it.

Reference: A. Telea, "An Image Inpainting Technique Based on the Fast
Marching Method", Journal of Graphics Tools 9(1), 2004.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from inpaint.errors import (
    CastError,
    DimensionMismatchError,
    NoDataError,
    ShapeError,
    UnresolvedPixelsError,
)
from inpaint.fmm.eikonal import eikonal_at
from inpaint.fmm.exterior import march_exterior
from inpaint.fmm.flags import (
    MAX,
    DistanceField,
    Flag,
    FlagGrid,
    classify_mask,
    in_bounds,
    neighbors,
)
from inpaint.fmm.narrow_band import Entry, NarrowBand
from inpaint.fmm.reconstruct import ReconstructionKernel

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 5


def check_radius(radius: int) -> None:
    """Raise ShapeError unless ``radius`` is an integer of at least 1."""
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise ShapeError(f"Radius must be an integer, got {radius!r}")
    if radius < 1:
        raise ShapeError(f"Radius must be at least 1, got {radius}")


def _validate(image: np.ndarray, mask: np.ndarray, radius: int) -> None:
    if not isinstance(image, np.ndarray):
        raise ShapeError(f"Image must be a numpy array, got {type(image).__name__}")
    if image.ndim != 3:
        raise ShapeError(f"Image must have shape (H, W, C), got {image.shape}")
    if mask.ndim != 2:
        raise ShapeError(f"Mask must have shape (H, W), got {mask.shape}")
    if image.size == 0:
        raise NoDataError("No image data have been provided")
    if not np.issubdtype(image.dtype, np.floating):
        raise CastError(f"Image samples must be floating point, got {image.dtype}")
    if not image.flags.writeable:
        raise ShapeError("Image buffer is read-only")
    if image.shape[:2] != mask.shape:
        raise DimensionMismatchError(image.shape, mask.shape)
    check_radius(radius)


class MarchingState:
    """Working state of one inpainting call.

    Usage:
        state = MarchingState.initialize(image, mask, radius=5)
        state.march_exterior()
        state.run()
        state.write_back(image)

    ``telea_inpaint`` does exactly this; the state object is exposed so the
    march can be driven one ``step`` at a time and inspected.
    """

    def __init__(
        self,
        work: NDArray[np.float64],
        flags: FlagGrid,
        distances: DistanceField,
        band: NarrowBand,
        radius: int,
        inside: NDArray[np.bool_],
    ):
        self.work = work
        self.flags = flags
        self.distances = distances
        self.band = band
        self.radius = radius
        self.inside = inside
        self.kernel = ReconstructionKernel(radius)
        self.filled = 0
        self.stale_pops = 0

    @classmethod
    def initialize(
        cls, image: np.ndarray, mask: np.ndarray, radius: int = DEFAULT_RADIUS
    ) -> "MarchingState":
        """Classify the mask and seed the band with the ring around it.

        Raises:
            ShapeError, NoDataError, CastError, DimensionMismatchError:
                If the inputs are invalid. Nothing is modified in that case.
        """
        mask = np.asarray(mask)
        _validate(image, mask, radius)

        flags = classify_mask(mask)
        inside = flags == Flag.INSIDE
        distances = np.full(flags.shape, MAX, dtype=np.float64)
        band = NarrowBand()

        for row, col in zip(*np.nonzero(inside)):
            for n_row, n_col in neighbors(int(row), int(col)):
                if not in_bounds(n_row, n_col, flags.shape):
                    continue
                if flags[n_row, n_col] == Flag.KNOWN:
                    flags[n_row, n_col] = Flag.BAND
                    distances[n_row, n_col] = 0.0
                    band.push(0.0, n_row, n_col)

        logger.debug(
            "Initialized %dx%d grid: %d masked pixels, %d band pixels",
            flags.shape[1],
            flags.shape[0],
            int(np.count_nonzero(inside)),
            len(band),
        )
        return cls(image.astype(np.float64), flags, distances, band, int(radius), inside)

    def march_exterior(self) -> int:
        """Give the strip outside the mask negative distances (see ``exterior``)."""
        return march_exterior(self.distances, self.flags, self.band, self.radius)

    def step(self) -> Entry | None:
        """Finalize the next band pixel and reconstruct its INSIDE neighbors.

        Returns:
            The popped ``(distance, row, col)`` entry, or None once the band
            is empty.
        """
        while self.band:
            entry = self.band.pop()
            _, row, col = entry
            if self.flags[row, col] == Flag.KNOWN:
                # Only pushed on an INSIDE -> BAND transition, so this is a bug.
                self.stale_pops += 1
                logger.warning("Discarding stale narrow band entry %s", entry)
                continue
            self._finalize(row, col)
            return entry
        return None

    def _finalize(self, row: int, col: int) -> None:
        self.flags[row, col] = Flag.KNOWN

        for n_row, n_col in neighbors(row, col):
            distance = eikonal_at(n_row, n_col, self.distances, self.flags)
            if distance is None:
                continue
            self.distances[n_row, n_col] = distance
            self.work[n_row, n_col] = self.kernel(
                self.work, self.distances, self.flags, n_row, n_col
            )
            self.flags[n_row, n_col] = Flag.BAND
            self.band.push(distance, n_row, n_col)
            self.filled += 1

    def run(self) -> int:
        """Step until the band is empty.

        Returns:
            Number of pixels reconstructed.

        Raises:
            UnresolvedPixelsError: If INSIDE pixels remain once the band is empty.
        """
        while self.step() is not None:
            pass
        remaining = int(np.count_nonzero(self.flags == Flag.INSIDE))
        if remaining:
            raise UnresolvedPixelsError(remaining)
        logger.debug(
            "Filled %d pixels (%d stale band entries)", self.filled, self.stale_pops
        )
        return self.filled

    def write_back(self, image: np.ndarray) -> None:
        """Copy reconstructed values into the originally masked pixels of ``image``."""
        image[self.inside] = self.work[self.inside]


def telea_inpaint(
    image: np.ndarray, mask: np.ndarray, radius: int = DEFAULT_RADIUS
) -> int:
    """Inpaint ``image`` in place.

    Args:
        image: Float image, shape (H, W, C). Masked pixels are overwritten;
            all other pixels are left untouched.
        mask: Mask, shape (H, W), any numeric dtype. Pixels with a positive
            value are filled.
        radius: Neighborhood radius in pixels used for reconstruction. The
            distance field is also extended ``2 * radius`` pixels outside
            the mask.

    Returns:
        Number of pixels reconstructed (the number of masked pixels).

    Raises:
        DimensionMismatchError: If image and mask differ in height or width.
        ShapeError: If an array has the wrong number of dimensions or the
            radius is not a positive integer.
        CastError: If the image does not hold floating point samples.
        NoDataError: If the image is empty.
        UnresolvedPixelsError: If some masked pixels cannot be reached from
            any known pixel, e.g. the mask covers the whole image. The image
            is not modified in that case.
    """
    state = MarchingState.initialize(image, mask, radius)
    if not state.inside.any():
        return 0
    state.march_exterior()
    filled = state.run()
    state.write_back(image)
    return filled
