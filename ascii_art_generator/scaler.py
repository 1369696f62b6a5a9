"""
ASCII Art Generator - Scaling
=============================
Proportional downscaling of an image to fit maximum bounds.

The width and height passes are evaluated independently and the height pass
can override the result of the width pass. Both target sizes are computed with
two truncating integer divisions, and the height pass compares its new width
against ``max_height``. Output sizes depend on this exact arithmetic, so it is
kept as is.
"""

import logging
from typing import Optional

from PIL import Image

from ascii_art_generator.errors import ScaleError

logger = logging.getLogger(__name__)


def _unconstrained(bound: Optional[int]) -> bool:
    return bound is None or bound < 0


def _resize(image: Image.Image, width: int, height: int,
            resample: Image.Resampling) -> Image.Image:
    if width < 1 or height < 1:
        raise ScaleError(
            f"Cannot scale {image.width}x{image.height} image to {width}x{height}"
        )
    logger.debug("Resampling %dx%d -> %dx%d",
                 image.width, image.height, width, height)
    return image.resize((width, height), resample)


def scale(image: Image.Image,
          max_width: Optional[int] = None,
          max_height: Optional[int] = None,
          resample: Image.Resampling = Image.Resampling.BILINEAR) -> Image.Image:
    """
    Scale an image down if needed, keeping its aspect ratio.

    Args:
        image: Source image, never modified
        max_width: Maximum width (None or negative for no limit, 0 disables scaling)
        max_height: Maximum height (None or negative for no limit, 0 disables scaling)
        resample: Pillow resampling filter

    Returns:
        A new image; an unchanged copy if no scaling was needed

    Raises:
        ScaleError: If a computed target dimension is zero
    """
    result = image.copy()
    if max_width == 0 or max_height == 0:
        return result

    width, height = image.size

    if not _unconstrained(max_width) and width > max_width:
        new_height = max_width * 100 // width * height // 100
        # Too tall: leave it to the height pass
        if _unconstrained(max_height) or new_height <= max_height:
            result = _resize(result, max_width, new_height, resample)

    if not _unconstrained(max_height) and height > max_height:
        new_width = max_height * 100 // height * width // 100
        if _unconstrained(max_width) or new_width <= max_height:
            result = _resize(result, new_width, max_height, resample)

    return result
