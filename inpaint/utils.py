"""Utility functions for image and mask I/O."""

from pathlib import Path

import cv2
import numpy as np

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tiff", ".tif"}


def is_image(path: Path) -> bool:
    return path.suffix.lower() in IMAGE_EXTENSIONS


def mask_stats(mask: np.ndarray) -> tuple[int, int, float]:
    """Compute basic statistics about a mask.

    Args:
        mask: Mask, shape (H, W). Non-zero pixels count as masked.

    Returns:
        Tuple of (n_masked, total, percentage).
        - n_masked: number of non-zero pixels.
        - total: total number of pixels (H * W).
        - percentage: n_masked / total * 100.
    """
    n_masked = int(np.count_nonzero(mask))
    total = mask.shape[0] * mask.shape[1]
    pct = n_masked / total * 100 if total > 0 else 0.0
    return n_masked, total, pct


def list_images(directory: str | Path) -> list[Path]:
    """List image files in a directory, sorted by name.

    Args:
        directory: Path to directory.

    Returns:
        Sorted list of image file paths.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    images = [p for p in directory.iterdir() if p.is_file() and is_image(p)]
    images.sort(key=lambda p: p.name)
    return images


def load_image(path: str | Path) -> np.ndarray:
    """Load an image from disk as stored.

    Bit depth and alpha are preserved, so a 16-bit RGBA PNG comes back as
    (H, W, 4) uint16. Color images are in OpenCV's BGR(A) channel order.

    Args:
        path: Path to the image file.

    Returns:
        Image as numpy array, shape (H, W) or (H, W, C).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be read as an image.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ValueError(f"Could not read image: {path}")
    return image


def save_image(image: np.ndarray, path: str | Path) -> None:
    """Save an image to disk.

    Args:
        image: Image array (BGR(A) or grayscale).
        path: Output path. Parent directories are created if needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ok = cv2.imwrite(str(path), image)
    if not ok:
        raise IOError(f"Failed to write image: {path}")


def load_mask(path: str | Path) -> np.ndarray:
    """Load a mask from disk.

    Args:
        path: Path to the mask image (converted to grayscale, bit depth kept).

    Returns:
        Mask as numpy array, shape (H, W), dtype uint8 or uint16.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Mask not found: {path}")
    mask = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE | cv2.IMREAD_ANYDEPTH)
    if mask is None:
        raise ValueError(f"Could not read mask: {path}")
    return mask
