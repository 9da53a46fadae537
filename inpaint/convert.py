"""Conversion between caller arrays and the float64 working representation.

Masks are normalized by the representable maximum of their dtype, so a
``uint8`` mask of 255 and a ``uint16`` mask of 65535 both mean "fill". Image
samples are *not* rescaled: the core averages raw sample values, and integer
results are rounded back to the nearest representable value.
"""

import numpy as np
from numpy.typing import NDArray

from inpaint.errors import CastError, NoDataError, ShapeError

# Integers wider than this cannot round-trip through float64 exactly.
_MAX_INTEGER_BYTES = 4


def mask_scale(dtype: np.dtype) -> float:
    """Return the value that represents a fully masked pixel for ``dtype``."""
    dtype = np.dtype(dtype)
    if dtype == np.bool_:
        return 1.0
    if np.issubdtype(dtype, np.integer):
        return float(np.iinfo(dtype).max)
    if np.issubdtype(dtype, np.floating):
        return 1.0
    raise CastError(f"Unsupported mask dtype: {dtype}")


def normalize_mask(mask: np.ndarray) -> NDArray[np.float64]:
    """Scale a mask of any numeric dtype to float64 values in [0, 1].

    Args:
        mask: Mask array, shape (H, W).

    Returns:
        Float64 array of the same shape. Negative samples map to 0 and samples
        above the dtype maximum (floats > 1.0) map to 1.
    """
    mask = np.asarray(mask)
    scale = mask_scale(mask.dtype)
    return np.clip(mask.astype(np.float64) / scale, 0.0, 1.0)


def _check_sample_dtype(dtype: np.dtype) -> None:
    if np.issubdtype(dtype, np.floating):
        return
    if np.issubdtype(dtype, np.integer):
        if dtype.itemsize > _MAX_INTEGER_BYTES:
            raise CastError(
                f"Image dtype {dtype} is too wide to convert without loss; "
                f"use at most 32-bit integers."
            )
        return
    raise CastError(f"Unsupported image dtype: {dtype}")


def to_working(image: np.ndarray) -> tuple[NDArray[np.float64], bool]:
    """Copy an image into the float64 (H, W, C) layout the core operates on.

    Args:
        image: Image array, shape (H, W) or (H, W, C), integer or float dtype.

    Returns:
        Tuple of (work, squeeze).
        - work: float64 copy, shape (H, W, C).
        - squeeze: True if a channel axis was added for a 2-D input.

    Raises:
        NoDataError: If the image is empty.
        ShapeError: If the image is not 2-D or 3-D.
        CastError: If the dtype cannot be represented exactly in float64.
    """
    image = np.asarray(image)
    if image.size == 0:
        raise NoDataError("No image data have been provided")
    _check_sample_dtype(image.dtype)
    if image.ndim == 2:
        return image.astype(np.float64)[:, :, np.newaxis], True
    if image.ndim == 3:
        return image.astype(np.float64), False
    raise ShapeError(f"Image must have shape (H, W) or (H, W, C), got {image.shape}")


def from_working(
    work: NDArray[np.float64], dtype: np.dtype, squeeze: bool = False
) -> np.ndarray:
    """Convert a working buffer back to the caller's dtype and layout.

    Integer dtypes are rounded to nearest and clipped to the dtype's range;
    float dtypes are cast.
    """
    dtype = np.dtype(dtype)
    _check_sample_dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        result = np.clip(np.rint(work), info.min, info.max).astype(dtype)
    else:
        result = work.astype(dtype)
    if squeeze:
        return result[:, :, 0]
    return result
