"""Rendering subpackage.

Turns a completed :class:`rainbow_smoke.canvas.Canvas` into Pillow images and
image files. The growth engine never imports from here; encoding failures
surface as :class:`rainbow_smoke.errors.EncodingError` and leave the canvas
untouched.

See :mod:`rainbow_smoke.renderer.image` for the conversion routines.
"""

from .image import canvas_to_image, save_image, scale_image

__all__ = [
    "canvas_to_image",
    "save_image",
    "scale_image",
]
