"""Per-pixel region flags and the grids they live in."""

from enum import IntEnum
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

from inpaint.convert import normalize_mask

# Distance of a pixel the front has not reached yet.
MAX: float = 1.0e6

FlagGrid: TypeAlias = NDArray[np.int8]
"""Region flag per pixel. Shape: (H, W). Values: members of ``Flag``."""

DistanceField: TypeAlias = NDArray[np.float64]
"""Estimated distance to the mask boundary. Shape: (H, W)."""

# up, left, down, right as (d_row, d_col)
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


class Flag(IntEnum):
    """State of a pixel relative to the advancing front."""

    KNOWN = 0
    """Original value outside the mask, or a value that has been finalized."""
    BAND = 1
    """On the narrow band: distance known, waiting in the queue."""
    INSIDE = 2
    """Inside the mask and not reached yet."""


class ExteriorRole(IntEnum):
    """Roles used while marching outward from the band, away from the mask.

    The outward march reuses the Eikonal solver, which treats ``Flag.KNOWN``
    pixels as sources and ``Flag.INSIDE`` pixels as unreached, so each role
    shares its value with the flag the solver expects.
    """

    SETTLED = int(Flag.KNOWN)
    """Pixels inside the mask, plus band pixels once popped."""
    BAND = int(Flag.BAND)
    UNEXPLORED = int(Flag.INSIDE)
    """Pixels outside the mask the outward front has not reached."""


def neighbors(row: int, col: int) -> list[tuple[int, int]]:
    """Four axis-aligned neighbors of a pixel, possibly out of bounds."""
    return [(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS]


def in_bounds(row: int, col: int, shape: tuple[int, ...]) -> bool:
    return 0 <= row < shape[0] and 0 <= col < shape[1]


def classify_mask(mask: np.ndarray) -> FlagGrid:
    """Split a mask into INSIDE (to be filled) and KNOWN pixels.

    Any sample whose normalized value rounds up to 1 is masked, so every
    positive value counts regardless of the mask dtype.
    """
    inside = np.ceil(normalize_mask(mask)) >= 1.0
    return np.where(inside, Flag.INSIDE, Flag.KNOWN).astype(np.int8)


def exterior_roles(flags: FlagGrid) -> FlagGrid:
    """Build a fresh role grid for the outward march; ``flags`` is not modified."""
    roles = np.full(flags.shape, ExteriorRole.UNEXPLORED, dtype=np.int8)
    roles[flags == Flag.INSIDE] = ExteriorRole.SETTLED
    roles[flags == Flag.BAND] = ExteriorRole.BAND
    return roles
