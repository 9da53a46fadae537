"""First-order upwind solution of the Eikonal equation |grad T| = 1."""

import math

from inpaint.fmm.flags import MAX, DistanceField, Flag, FlagGrid, in_bounds

# (vertical, horizontal) neighbor pairs as (d_row, d_col) offsets
_EIKONAL_PAIRS = (
    ((-1, 0), (0, -1)),  # up, left
    ((1, 0), (0, 1)),  # down, right
    ((-1, 0), (0, 1)),  # up, right
    ((1, 0), (0, -1)),  # down, left
)


def solve_eikonal(
    a: tuple[int, int],
    b: tuple[int, int],
    distances: DistanceField,
    flags: FlagGrid,
) -> float:
    """Distance at the grid point between axis neighbors ``a`` and ``b``.

    Only KNOWN neighbors contribute. With two sources the quadratic
    ``(T - Da)^2 + (T - Db)^2 = 1`` is solved for the root not below either
    source; with one source the front is assumed to travel along the axis.

    Returns:
        The estimate, or ``MAX`` when no estimate is possible.
    """
    shape = distances.shape
    if not (in_bounds(a[0], a[1], shape) and in_bounds(b[0], b[1], shape)):
        return MAX

    a_known = flags[a] == Flag.KNOWN
    b_known = flags[b] == Flag.KNOWN
    a_distance = float(distances[a])
    b_distance = float(distances[b])

    if a_known and b_known:
        radicand = 2.0 - (a_distance - b_distance) ** 2
        if radicand > 0.0:
            r = math.sqrt(radicand)
            s = (a_distance + b_distance - r) / 2.0
            if s >= a_distance and s >= b_distance:
                return s
            s += r
            if s >= a_distance and s >= b_distance:
                return s
            return MAX

    if a_known:
        return 1.0 + a_distance
    if b_known:
        return 1.0 + b_distance
    return MAX


def eikonal_at(
    row: int, col: int, distances: DistanceField, flags: FlagGrid
) -> float | None:
    """Smallest Eikonal estimate over the four neighbor pairs of a pixel.

    Returns:
        The estimate, or None if the pixel is out of bounds or not INSIDE.
    """
    if not in_bounds(row, col, flags.shape):
        return None
    if flags[row, col] != Flag.INSIDE:
        return None
    return min(
        solve_eikonal(
            (row + vertical[0], col + vertical[1]),
            (row + horizontal[0], col + horizontal[1]),
            distances,
            flags,
        )
        for vertical, horizontal in _EIKONAL_PAIRS
    )
