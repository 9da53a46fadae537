"""Signed distances just outside the mask.

Pixel reconstruction compares distances across the mask boundary, so the
distance field must also be meaningful on the known side. A short outward
march fills a strip of width ``2 * radius`` around the band; negating the
field afterwards gives those pixels negative distances, while the inward
march later overwrites the interior with positive ones.
"""

import logging

from inpaint.fmm.eikonal import eikonal_at
from inpaint.fmm.flags import DistanceField, ExteriorRole, FlagGrid, exterior_roles, neighbors
from inpaint.fmm.narrow_band import NarrowBand

logger = logging.getLogger(__name__)


def march_exterior(
    distances: DistanceField,
    flags: FlagGrid,
    band: NarrowBand,
    radius: int,
) -> int:
    """March outward from the band and negate the distance field in place.

    Works on its own role grid and a clone of ``band``; only ``distances``
    is modified.

    Returns:
        Number of exterior pixels that received a distance.
    """
    roles = exterior_roles(flags)
    front = band.clone()
    limit = 2.0 * radius

    last_distance = 0.0
    resolved = 0
    while front:
        if last_distance >= limit:
            break
        _, row, col = front.pop()
        roles[row, col] = ExteriorRole.SETTLED

        for n_row, n_col in neighbors(row, col):
            distance = eikonal_at(n_row, n_col, distances, roles)
            if distance is None:
                continue
            last_distance = distance
            distances[n_row, n_col] = distance
            roles[n_row, n_col] = ExteriorRole.BAND
            front.push(distance, n_row, n_col)
            resolved += 1

    distances *= -1.0
    logger.debug(
        "Exterior march resolved %d pixels (stopped at %.3f, limit %.1f)",
        resolved,
        last_distance,
        limit,
    )
    return resolved
