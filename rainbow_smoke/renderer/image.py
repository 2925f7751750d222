"""Canvas encoding.

Converts a finished canvas to an RGBA Pillow image (alpha added here, never
stored on the canvas) and writes it to disk. Write failures are re-raised as
:class:`rainbow_smoke.errors.EncodingError`.
"""

import logging
import os

import numpy as np
import numpy.typing as npt
from PIL import Image

from rainbow_smoke.canvas import Canvas
from rainbow_smoke.errors import EncodingError

logger = logging.getLogger(__name__)

UInt8Array = npt.NDArray[np.uint8]

OPAQUE = 255


def canvas_to_rgba(canvas: Canvas) -> UInt8Array:
    """
    Stack the canvas RGB array with a fully opaque alpha channel.
    Uncolored cells come out as transparent black.
    """
    alpha: UInt8Array = np.where(canvas.filled, np.uint8(OPAQUE), np.uint8(0)).astype(
        np.uint8
    )
    return np.dstack([canvas.pixels, alpha])


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """
    Build an RGBA Pillow image from the canvas (x to the right, y downwards).
    """
    return Image.fromarray(canvas_to_rgba(canvas))


def scale_image(image: Image.Image, factor: int) -> Image.Image:
    """
    Nearest-neighbour upscale so single pixels stay crisp in previews.
    """
    if factor < 1:
        raise ValueError(f"Scale factor must be >= 1, got {factor}")
    if factor == 1:
        return image
    return image.resize(
        (image.width * factor, image.height * factor), Image.Resampling.NEAREST
    )


def save_image(canvas: Canvas, path: str | os.PathLike[str]) -> None:
    """
    Write the canvas to ``path``; the format follows the file extension.

    Raises:
        EncodingError: If the file cannot be created or the image cannot be
            serialized.
    """
    image = canvas_to_image(canvas)
    try:
        image.save(path)
    except (OSError, ValueError) as exc:
        raise EncodingError(f"Couldn't write image to {path}: {exc}") from exc
    logger.info("Wrote %dx%d image to %s", canvas.width, canvas.height, path)
