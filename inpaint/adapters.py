"""Non-mutating entry points for arrays of any dtype and for Pillow images."""

import numpy as np
from PIL import Image

from inpaint.convert import from_working, to_working
from inpaint.errors import CastError, DimensionMismatchError
from inpaint.fmm.telea import DEFAULT_RADIUS, telea_inpaint

# Pillow modes whose pixels map onto a plain numeric array.
PIL_MODES = {"L", "LA", "RGB", "RGBA", "I", "I;16", "F"}


def inpaint_array(
    image: np.ndarray, mask: np.ndarray, radius: int = DEFAULT_RADIUS
) -> np.ndarray:
    """Inpaint a copy of ``image``.

    Args:
        image: Image array, shape (H, W) or (H, W, C), integer (up to 32-bit)
            or float dtype.
        mask: Mask, shape (H, W), any numeric dtype. Positive values are filled.
        radius: Neighborhood radius in pixels.

    Returns:
        New array with the same shape and dtype as ``image``.
    """
    image = np.asarray(image)
    work, squeeze = to_working(image)
    telea_inpaint(work, mask, radius)
    return from_working(work, image.dtype, squeeze)


def inpaint_pil(
    image: Image.Image, mask: Image.Image, radius: int = DEFAULT_RADIUS
) -> Image.Image:
    """Inpaint a Pillow image with a mask image of the same size.

    Args:
        image: Image in one of ``PIL_MODES``.
        mask: Mask image. Multi-band masks are converted to "L" first.
        radius: Neighborhood radius in pixels.

    Returns:
        New image with the same mode and size.
    """
    if image.mode not in PIL_MODES:
        raise CastError(
            f"Unsupported image mode '{image.mode}'. "
            f"Supported: {', '.join(sorted(PIL_MODES))}"
        )
    if mask.size != image.size:
        width, height = image.size
        mask_width, mask_height = mask.size
        raise DimensionMismatchError((height, width), (mask_height, mask_width))
    if len(mask.getbands()) != 1:
        mask = mask.convert("L")

    result = inpaint_array(np.asarray(image), np.asarray(mask), radius)
    return Image.fromarray(result)
