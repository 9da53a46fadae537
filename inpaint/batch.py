"""Batch processing for directories of images.

Every image in the input directory is inpainted with the same mask and
written to the output directory under its original name.
"""

import shutil
import time
from pathlib import Path

import numpy as np

from inpaint.errors import InpaintError
from inpaint.inpainters.base import Inpainter
from inpaint.utils import list_images, load_image, mask_stats, save_image


def inpaint_batch(
    input_path: Path,
    output_path: Path,
    mask: np.ndarray,
    inpainter: Inpainter,
) -> list[Path]:
    """Inpaint every image of a directory with a shared mask.

    Images the inpainter rejects (e.g. a size that does not match the mask)
    are reported and skipped; the rest of the batch still runs.

    Args:
        input_path: Directory of input images.
        output_path: Output directory, created if needed.
        mask: Mask, shape (H, W), shared by all images.
        inpainter: Inpainter instance.

    Returns:
        Paths of the input images that failed.

    Raises:
        FileNotFoundError: If the directory holds no images.
    """
    total_t0 = time.time()

    image_paths = list_images(input_path)
    if not image_paths:
        raise FileNotFoundError(f"No image files found in {input_path}")
    n = len(image_paths)
    print(f"  Source: directory ({n} images)")

    out_dir = Path(output_path)
    out_dir.mkdir(parents=True, exist_ok=True)

    n_masked, _, pct = mask_stats(mask)
    failed: list[Path] = []

    if n_masked == 0:
        print("  Mask is empty. Copying originals.")
        for i, p in enumerate(image_paths):
            shutil.copy2(p, out_dir / p.name)
            print(f"  [{i + 1}/{n}] {p.name} (copied)")
        return failed

    print(f"\n  Inpainting {n} images with {inpainter.name} ({pct:.1f}% masked)...")
    for i, p in enumerate(image_paths):
        t0 = time.time()
        image = load_image(p)
        try:
            result = inpainter.inpaint(image, mask)
        except InpaintError as exc:
            print(f"  [{i + 1}/{n}] {p.name} ERROR: {exc} Skipping.")
            failed.append(p)
            continue
        save_image(result, out_dir / p.name)
        elapsed = time.time() - t0
        print(f"  [{i + 1}/{n}] {p.name} ({elapsed:.1f}s)")

    total_elapsed = time.time() - total_t0
    print(
        f"\n  Batch complete: {n - len(failed)}/{n} images in {total_elapsed:.1f}s "
        f"({total_elapsed / n:.1f}s/image avg)"
    )
    return failed
