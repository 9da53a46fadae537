"""Inpainter interface and implementation."""

from inpaint.inpainters.base import Inpainter
from inpaint.inpainters.telea import TeleaInpainter

__all__ = [
    "Inpainter",
    "TeleaInpainter",
]
