import math

import numpy as np
import pytest

from inpaint.fmm.eikonal import eikonal_at, solve_eikonal
from inpaint.fmm.flags import MAX, Flag


def _grid(shape=(3, 3), flag=Flag.INSIDE, distance=MAX):
    flags = np.full(shape, flag, dtype=np.int8)
    distances = np.full(shape, distance, dtype=np.float64)
    return distances, flags


def test_out_of_bounds_neighbor_gives_max():
    distances, flags = _grid(flag=Flag.KNOWN, distance=0.0)
    assert solve_eikonal((-1, 1), (1, 0), distances, flags) == MAX
    assert solve_eikonal((0, 1), (1, 3), distances, flags) == MAX


def test_two_known_sources_at_equal_distance():
    distances, flags = _grid(flag=Flag.KNOWN, distance=0.0)
    assert solve_eikonal((0, 1), (1, 0), distances, flags) == pytest.approx(
        math.sqrt(2.0) / 2.0
    )


def test_two_known_sources_one_apart():
    distances, flags = _grid(flag=Flag.KNOWN, distance=0.0)
    distances[0, 1] = 1.0
    assert solve_eikonal((0, 1), (1, 0), distances, flags) == pytest.approx(1.0)


def test_two_known_sources_far_apart_fall_back_to_first():
    distances, flags = _grid(flag=Flag.KNOWN, distance=0.0)
    distances[0, 1] = 2.0
    # radicand 2 - 4 < 0: the single-source rule applies to ``a`` first
    assert solve_eikonal((0, 1), (1, 0), distances, flags) == 3.0
    assert solve_eikonal((1, 0), (0, 1), distances, flags) == 1.0


def test_single_known_source():
    distances, flags = _grid()
    flags[0, 1] = Flag.KNOWN
    distances[0, 1] = 0.5
    assert solve_eikonal((0, 1), (1, 0), distances, flags) == 1.5
    assert solve_eikonal((1, 0), (0, 1), distances, flags) == 1.5


def test_band_and_inside_neighbors_are_not_sources():
    distances, flags = _grid(distance=0.0)
    flags[0, 1] = Flag.BAND
    assert solve_eikonal((0, 1), (1, 0), distances, flags) == MAX


def test_eikonal_at_skips_pixels_that_are_not_inside():
    distances, flags = _grid(flag=Flag.KNOWN, distance=0.0)
    assert eikonal_at(1, 1, distances, flags) is None
    flags[1, 1] = Flag.BAND
    assert eikonal_at(1, 1, distances, flags) is None
    assert eikonal_at(-1, 0, distances, flags) is None
    assert eikonal_at(0, 3, distances, flags) is None


def test_eikonal_at_single_known_neighbor():
    distances, flags = _grid()
    flags[0, 1] = Flag.KNOWN
    distances[0, 1] = 0.0
    assert eikonal_at(1, 1, distances, flags) == 1.0


def test_eikonal_at_takes_minimum_over_pairs():
    distances, flags = _grid()
    flags[0, 1] = Flag.KNOWN  # up
    flags[1, 0] = Flag.KNOWN  # left
    distances[0, 1] = 0.0
    distances[1, 0] = 0.0
    flags[2, 1] = Flag.KNOWN  # down, far away
    distances[2, 1] = 5.0
    assert eikonal_at(1, 1, distances, flags) == pytest.approx(math.sqrt(2.0) / 2.0)


def test_eikonal_at_corner_pixel_uses_in_bounds_pairs():
    distances, flags = _grid()
    flags[0, 1] = Flag.KNOWN  # right of the corner
    distances[0, 1] = 0.0
    assert eikonal_at(0, 0, distances, flags) == 1.0


def test_eikonal_at_single_column_has_no_valid_pair():
    distances, flags = _grid(shape=(3, 1))
    flags[0, 0] = Flag.KNOWN
    distances[0, 0] = 0.0
    assert eikonal_at(1, 0, distances, flags) == MAX
