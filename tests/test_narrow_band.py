import numpy as np
import pytest

from inpaint.fmm.narrow_band import NarrowBand


def test_pop_order_is_distance_then_row_then_column():
    band = NarrowBand()
    band.push(1.0, 5, 5)
    band.push(0.0, 3, 2)
    band.push(0.0, 1, 7)
    band.push(0.0, 1, 3)
    band.push(0.5, 0, 0)

    popped = [band.pop() for _ in range(len(band))]
    assert popped == [
        (0.0, 1, 3),
        (0.0, 1, 7),
        (0.0, 3, 2),
        (0.5, 0, 0),
        (1.0, 5, 5),
    ]
    assert not band


def test_pop_from_empty_band_raises():
    band = NarrowBand()
    with pytest.raises(IndexError):
        band.pop()
    with pytest.raises(IndexError):
        band.peek()


def test_duplicate_coordinates_are_kept():
    band = NarrowBand()
    band.push(2.0, 1, 1)
    band.push(1.0, 1, 1)
    assert len(band) == 2
    assert band.pop() == (1.0, 1, 1)
    assert band.pop() == (2.0, 1, 1)


def test_clone_is_independent():
    band = NarrowBand([(0.0, 0, 1), (0.0, 1, 0)])
    copy = band.clone()
    copy.pop()
    copy.push(3.0, 2, 2)

    assert len(band) == 2
    assert list(band) == [(0.0, 0, 1), (0.0, 1, 0)]
    assert list(copy) == [(0.0, 1, 0), (3.0, 2, 2)]


def test_iteration_does_not_consume():
    band = NarrowBand([(2.0, 0, 0), (1.0, 4, 4)])
    assert list(band) == [(1.0, 4, 4), (2.0, 0, 0)]
    assert len(band) == 2
    assert band.peek() == (1.0, 4, 4)


def test_entries_are_normalized_to_python_types():
    band = NarrowBand()
    band.push(np.float32(1.5), np.int64(2), np.int64(3))
    distance, row, col = band.pop()
    assert type(distance) is float
    assert type(row) is int and type(col) is int
