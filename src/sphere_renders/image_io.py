"""
Image output for rendered canvases, backed by Pillow.
"""
import logging
import os

import numpy as np
import PIL.Image

logger = logging.getLogger(__name__)


def save_image(pixels, path):
    """
    Write an (H, W, 3) uint8 grid to *path*; the format follows the extension.

    Parent directories are created as needed. Write failures propagate as OSError.
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"pixels must be an (H, W, 3) array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"pixels must be uint8, got {pixels.dtype}")

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    PIL.Image.fromarray(pixels).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path


def load_image(path):
    """Read an image back as an (H, W, 3) uint8 array."""
    with PIL.Image.open(path) as im:
        return np.asarray(im.convert("RGB"), dtype=np.uint8)
