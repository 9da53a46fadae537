"""Weighted reconstruction of a single pixel from its filled neighborhood."""

import numpy as np
from numpy.typing import NDArray

from inpaint.fmm.flags import MAX, DistanceField, Flag, FlagGrid

_EPSILON: float = float(np.finfo(np.float64).eps)


def _axis_gradient(
    distances: DistanceField,
    flags: FlagGrid,
    row: int,
    col: int,
    axis: int,
) -> float:
    """Finite-difference derivative of the distance field along one axis."""
    index = (row, col)[axis]
    if index == 0 or index + 1 >= distances.shape[axis]:
        return MAX

    if axis == 0:
        previous, following = (row - 1, col), (row + 1, col)
    else:
        previous, following = (row, col - 1), (row, col + 1)
    previous_known = flags[previous] != Flag.INSIDE
    following_known = flags[following] != Flag.INSIDE

    if previous_known and following_known:
        return float(distances[following] - distances[previous]) / 2.0
    if previous_known:
        return float(distances[row, col] - distances[previous])
    if following_known:
        return float(distances[following] - distances[row, col])
    return 0.0


def pixel_gradient(
    row: int, col: int, distances: DistanceField, flags: FlagGrid
) -> tuple[float, float]:
    """Return (d/d_row, d/d_col) of the distance field at a pixel.

    Central differences are used where both axis neighbors are filled,
    one-sided differences where only one is, and zero where neither is.
    Pixels on the image border get ``MAX`` along the clipped axis.
    """
    return (
        _axis_gradient(distances, flags, row, col, axis=0),
        _axis_gradient(distances, flags, row, col, axis=1),
    )


class ReconstructionKernel:
    """Telea's weighted average over the disk of a given radius.

    Offsets and the purely geometric distance factor depend only on the
    radius, so they are computed once and reused for every pixel.
    """

    def __init__(self, radius: int):
        self.radius = radius
        span = np.arange(-radius, radius + 1)
        d_row, d_col = np.meshgrid(span, span, indexing="ij")
        length_sq = d_row**2 + d_col**2
        # The center is always INSIDE when reconstructed, so it never contributes.
        keep = (length_sq > 0) & (length_sq <= radius * radius)

        # Direction from candidate to target: candidate = target - offset.
        self.d_row = d_row[keep]
        self.d_col = d_col[keep]
        length_sq = length_sq[keep].astype(np.float64)
        self.distance_factor = 1.0 / (np.sqrt(length_sq) * length_sq)

    def __len__(self) -> int:
        return len(self.d_row)

    def __call__(
        self,
        image: NDArray[np.float64],
        distances: DistanceField,
        flags: FlagGrid,
        row: int,
        col: int,
    ) -> NDArray[np.float64]:
        """Reconstruct the channels of pixel (row, col).

        Args:
            image: Working buffer, shape (H, W, C).
            distances: Distance field with the target's distance already set.
            flags: Flags; INSIDE pixels are excluded from the average.
            row, col: Target pixel.

        Returns:
            Channel values, shape (C,).
        """
        height, width = flags.shape
        rows = row - self.d_row
        cols = col - self.d_col
        idx = np.flatnonzero((rows >= 0) & (rows < height) & (cols >= 0) & (cols < width))
        idx = idx[flags[rows[idx], cols[idx]] != Flag.INSIDE]
        rows = rows[idx]
        cols = cols[idx]

        grad_row, grad_col = pixel_gradient(row, col, distances, flags)
        directional = np.abs(self.d_row[idx] * grad_row + self.d_col[idx] * grad_col)
        directional[directional == 0.0] = _EPSILON

        level = 1.0 / (1.0 + np.abs(distances[rows, cols] - distances[row, col]))
        weights = np.abs(directional * self.distance_factor[idx] * level)

        # Average offsets from the first sample so a constant neighborhood is
        # reproduced exactly, whatever its value.
        samples = image[rows, cols]
        reference = samples[0]
        offsets = (weights[:, np.newaxis] * (samples - reference)).sum(axis=0)
        return reference + offsets / weights.sum()
