"""Exception types raised by the inpainting core and its adapters."""


class InpaintError(Exception):
    """Base class for all errors raised by this package."""


class DimensionMismatchError(InpaintError, ValueError):
    """Image and mask do not share the same height and width."""

    def __init__(self, image_shape: tuple[int, ...], mask_shape: tuple[int, ...]):
        self.image_shape = tuple(image_shape)
        self.mask_shape = tuple(mask_shape)
        super().__init__(
            f"Dimensions between image {self.image_shape[:2]} and "
            f"mask {self.mask_shape[:2]} don't match."
        )


class ShapeError(InpaintError, ValueError):
    """A buffer or parameter does not have the layout the core expects."""


class CastError(InpaintError, ValueError):
    """Samples could not be converted to or from the working representation."""


class NoDataError(InpaintError, ValueError):
    """No image data have been provided."""


class UnresolvedPixelsError(InpaintError, RuntimeError):
    """The narrow band ran dry while masked pixels were still unresolved."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            f"Narrow band emptied with {remaining} masked pixel(s) unresolved; "
            f"the mask must leave at least one known pixel next to every "
            f"masked region."
        )
