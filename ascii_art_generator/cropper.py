"""
ASCII Art Generator - Cropping
==============================
Removal of blank borders around an image.

A pixel is blank when it is fully transparent or pure white. Each scan records
the index of the last blank row or column before the first non-blank one, so
one blank line stays on the top and left sides. A scan from the bottom or
right that ends on index 0 means that side has no border.
"""

import logging
from typing import Dict

import numpy as np
from PIL import Image

from ascii_art_generator.errors import CropError

logger = logging.getLogger(__name__)


def blank_mask(image: Image.Image) -> np.ndarray:
    """
    Find the pixels that may be cropped away.

    Args:
        image: Source image

    Returns:
        Boolean array of shape (height, width)
    """
    arr = np.array(image.convert('RGBA'))
    transparent = arr[..., 3] == 0
    white = np.all(arr[..., :3] == 255, axis=-1)
    return transparent | white


def _last_blank(blank_lines: np.ndarray, indices: range) -> int:
    last = 0
    for index in indices:
        if not blank_lines[index]:
            break
        last = index
    return last


def find_bounds(image: Image.Image) -> Dict[str, int]:
    """
    Compute the crop box of an image.

    Returns:
        Dict with topmost, bottommost, leftmost, rightmost,
        cropped_width and cropped_height
    """
    width, height = image.size
    mask = blank_mask(image)
    blank_rows = mask.all(axis=1)
    blank_cols = mask.all(axis=0)

    topmost = _last_blank(blank_rows, range(height))
    bottommost = _last_blank(blank_rows, range(height - 1, -1, -1))
    leftmost = _last_blank(blank_cols, range(width))
    rightmost = _last_blank(blank_cols, range(width - 1, -1, -1))

    if rightmost == 0:
        rightmost = width
    if bottommost == 0:
        bottommost = height

    cropped_width = rightmost - leftmost
    cropped_height = bottommost - topmost

    # No border on left or right
    if cropped_width == 0:
        leftmost = 0
        cropped_width = width
    # No border on top or bottom
    if cropped_height == 0:
        topmost = 0
        cropped_height = height

    return {
        'topmost': topmost,
        'bottommost': bottommost,
        'leftmost': leftmost,
        'rightmost': rightmost,
        'cropped_width': cropped_width,
        'cropped_height': cropped_height,
    }


def crop_to_bounds(image: Image.Image, bounds: Dict[str, int]) -> Image.Image:
    """
    Copy the region described by ``bounds`` into a new image.

    Raises:
        CropError: If the region is empty or does not lie within the image
    """
    left = bounds['leftmost']
    top = bounds['topmost']
    right = left + bounds['cropped_width']
    bottom = top + bounds['cropped_height']

    if (left < 0 or top < 0 or right <= left or bottom <= top
            or right > image.width or bottom > image.height):
        raise CropError(bounds)

    try:
        cropped = image.crop((left, top, right, bottom))
        cropped.load()
    except (ValueError, OSError) as exc:
        raise CropError(bounds) from exc
    return cropped


def crop(image: Image.Image) -> Image.Image:
    """
    Remove white or transparent borders from an image.

    Args:
        image: Source image, never modified

    Returns:
        A new image; an unchanged copy if nothing can be cropped

    Raises:
        CropError: If the computed box cannot be applied
    """
    bounds = find_bounds(image)
    logger.debug("Crop bounds: %s", bounds)

    if bounds['cropped_width'] == image.width and bounds['cropped_height'] == image.height:
        return image.copy()
    return crop_to_bounds(image, bounds)
