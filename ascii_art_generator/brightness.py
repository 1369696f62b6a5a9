"""
ASCII Art Generator - Brightness
================================
Extraction of a brightness map from an image.
"""

from typing import Callable, Optional

import numpy as np
from PIL import Image

from ascii_art_generator.constants import PROGRESS_INTERVAL
from ascii_art_generator.models import BrightnessMap

# Called with (row, height) every few rows
ProgressCallback = Callable[[int, int], None]


def lightness(pixels: np.ndarray) -> np.ndarray:
    """
    HSL lightness of RGBA pixels.

    Args:
        pixels: Array of shape (..., 4) with 0-255 components

    Returns:
        float32 array of shape (...) in [0, 1]; fully transparent pixels are 1.0
    """
    rgb = pixels[..., :3].astype(np.float32)
    value = (rgb.max(axis=-1) + rgb.min(axis=-1)) / (2 * 255.0)
    return np.where(pixels[..., 3] == 0, np.float32(1.0), value).astype(np.float32)


def extract_brightness(image: Image.Image,
                       progress: Optional[ProgressCallback] = None,
                       interval: int = PROGRESS_INTERVAL) -> BrightnessMap:
    """
    Build the brightness map of an image.

    Args:
        image: Source image
        progress: Optional callback notified every ``interval`` rows
        interval: Rows between notifications

    Returns:
        BrightnessMap with the width of the image
    """
    arr = np.array(image.convert('RGBA'))
    height, width = arr.shape[:2]
    values = np.empty((height, width), dtype=np.float32)

    for y in range(height):
        values[y] = lightness(arr[y])
        if progress is not None and interval > 0 and y % interval == 0:
            progress(y, height)

    return BrightnessMap(width=width, values=values)
