import numpy as np

from inpaint.fmm.flags import (
    ExteriorRole,
    Flag,
    classify_mask,
    exterior_roles,
    neighbors,
)


def test_classify_mask_uint8_any_positive_value_is_inside():
    mask = np.array([[0, 1], [128, 255]], dtype=np.uint8)
    flags = classify_mask(mask)
    assert flags.dtype == np.int8
    assert flags.tolist() == [
        [Flag.KNOWN, Flag.INSIDE],
        [Flag.INSIDE, Flag.INSIDE],
    ]


def test_classify_mask_scales_by_dtype_maximum():
    mask16 = np.array([[0, 1, 65535]], dtype=np.uint16)
    assert classify_mask(mask16).tolist() == [[Flag.KNOWN, Flag.INSIDE, Flag.INSIDE]]

    mask_bool = np.array([[False, True]])
    assert classify_mask(mask_bool).tolist() == [[Flag.KNOWN, Flag.INSIDE]]


def test_classify_mask_float_and_negative_samples():
    mask = np.array([[0.0, 0.2, 1.0, 3.0, -1.0]], dtype=np.float32)
    assert classify_mask(mask).tolist() == [
        [Flag.KNOWN, Flag.INSIDE, Flag.INSIDE, Flag.INSIDE, Flag.KNOWN]
    ]

    mask_i8 = np.array([[-5, 0, 5]], dtype=np.int8)
    assert classify_mask(mask_i8).tolist() == [[Flag.KNOWN, Flag.KNOWN, Flag.INSIDE]]


def test_neighbors_are_axis_aligned_up_left_down_right():
    assert neighbors(3, 5) == [(2, 5), (3, 4), (4, 5), (3, 6)]
    assert neighbors(0, 0) == [(-1, 0), (0, -1), (1, 0), (0, 1)]


def test_exterior_roles_swap_interior_and_exterior_without_touching_flags():
    flags = np.array(
        [[Flag.KNOWN, Flag.BAND, Flag.INSIDE]],
        dtype=np.int8,
    )
    before = flags.copy()
    roles = exterior_roles(flags)

    assert roles.tolist() == [
        [ExteriorRole.UNEXPLORED, ExteriorRole.BAND, ExteriorRole.SETTLED]
    ]
    assert np.array_equal(flags, before)
    assert roles is not flags


def test_exterior_roles_share_values_with_flags():
    assert ExteriorRole.SETTLED == Flag.KNOWN
    assert ExteriorRole.BAND == Flag.BAND
    assert ExteriorRole.UNEXPLORED == Flag.INSIDE
