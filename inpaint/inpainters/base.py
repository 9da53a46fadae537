from abc import ABC, abstractmethod

import numpy as np

from inpaint.errors import DimensionMismatchError


class Inpainter(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this inpainter."""
        ...

    @abstractmethod
    def _inpaint(self, image: np.ndarray, mask: np.ndarray) -> np.ndarray: ...

    def inpaint(self, image: np.ndarray, mask: np.ndarray) -> np.ndarray:
        """Return a copy of ``image`` with the masked region filled.

        Args:
            image: Image array, shape (H, W) or (H, W, C).
            mask: Mask, shape (H, W) or (H, W, C); only the first channel of
                a multi-channel mask is used. Non-zero pixels are filled.

        Raises:
            DimensionMismatchError: If mask and image sizes differ.
        """
        mask = self._conform_mask(mask, image)
        return self._inpaint(image, mask)

    @staticmethod
    def _conform_mask(mask: np.ndarray, image: np.ndarray) -> np.ndarray:
        if mask.ndim == 3:
            mask = mask[:, :, 0]
        if mask.shape[:2] != image.shape[:2]:
            raise DimensionMismatchError(image.shape, mask.shape)
        return mask
