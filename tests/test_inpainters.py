import numpy as np
import pytest

from inpaint.errors import DimensionMismatchError, ShapeError
from inpaint.inpainters import Inpainter, TeleaInpainter


def test_telea_inpainter_name_and_radius():
    inpainter = TeleaInpainter(radius=3)
    assert inpainter.name == "telea(radius=3)"
    assert inpainter.radius == 3
    assert TeleaInpainter().radius == 5


@pytest.mark.parametrize("radius", [0, -2, 2.5, True, "3"])
def test_telea_inpainter_rejects_bad_radius(radius):
    with pytest.raises(ShapeError):
        TeleaInpainter(radius=radius)


def test_telea_inpainter_accepts_numpy_integer_radius():
    inpainter = TeleaInpainter(radius=np.int64(4))
    assert inpainter.name == "telea(radius=4)"


def test_inpainter_is_abstract():
    with pytest.raises(TypeError):
        Inpainter()


def test_telea_inpainter_fills_mask():
    image = np.full((8, 8, 3), 64, dtype=np.uint8)
    mask = np.zeros((8, 8), dtype=np.uint8)
    mask[2:5, 3:6] = 255
    image[mask > 0] = 0

    result = TeleaInpainter(radius=2).inpaint(image, mask)

    assert np.all(result == 64)
    assert image[3, 4].tolist() == [0, 0, 0]


def test_multichannel_mask_uses_first_channel():
    image = np.full((6, 6, 3), 100, dtype=np.uint8)
    mask = np.zeros((6, 6, 3), dtype=np.uint8)
    mask[2:4, 2:4, 0] = 255
    mask[0, 0, 1] = 255
    image[2:4, 2:4] = 0
    image[0, 0] = 7

    result = TeleaInpainter(radius=2).inpaint(image, mask)

    assert np.all(result[2:4, 2:4] == 100)
    assert result[0, 0].tolist() == [7, 7, 7]


def test_size_mismatch_is_reported():
    image = np.zeros((6, 6, 3), dtype=np.uint8)
    mask = np.zeros((4, 6), dtype=np.uint8)
    with pytest.raises(DimensionMismatchError) as excinfo:
        TeleaInpainter().inpaint(image, mask)
    assert excinfo.value.image_shape[:2] == (6, 6)
    assert excinfo.value.mask_shape == (4, 6)


def test_custom_inpainter_gets_conformed_mask():
    class Recording(Inpainter):
        name = "recording"

        def _inpaint(self, image, mask):
            self.mask = mask
            return image

    inpainter = Recording()
    mask = np.ones((3, 3, 4), dtype=np.uint8)
    inpainter.inpaint(np.zeros((3, 3)), mask)

    assert inpainter.mask.shape == (3, 3)
