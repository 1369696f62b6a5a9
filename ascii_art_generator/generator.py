#!/usr/bin/env python3
"""
ASCII Art Generator - Pipeline
==============================
Runs an image through cropping, scaling, brightness extraction and
character mapping.
"""

import logging
from typing import Optional

from PIL import Image

from ascii_art_generator.brightness import ProgressCallback, extract_brightness
from ascii_art_generator.constants import DEFAULT_RAMP
from ascii_art_generator.cropper import crop
from ascii_art_generator.models import GenerationResult, GeneratorConfig
from ascii_art_generator.scaler import scale

logger = logging.getLogger(__name__)


class AsciiArtGenerator:
    """Main class for generating ASCII art from images."""

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 progress: Optional[ProgressCallback] = None):
        """Initialize with optional configuration and progress callback."""
        self.config = config or GeneratorConfig()
        self.progress = progress

    def generate(self, image: Image.Image) -> GenerationResult:
        """
        Generate ASCII art from a PIL Image.

        Args:
            image: PIL Image to convert, left untouched

        Returns:
            GenerationResult containing the text and the intermediate sizes

        Raises:
            CropError: If cropping fails
            ScaleError: If the bounds leave no pixels
        """
        config = self.config
        original_size = image.size
        working = image.convert('RGBA')
        cropped_size = scaled_size = None

        if config.crop:
            logger.info("Cropping image...")
            working = crop(working)
            cropped_size = working.size
            logger.debug("Cropped %s -> %s", original_size, cropped_size)

        if config.scaling_requested:
            logger.info("Scaling image...")
            before = working.size
            working = scale(working, config.max_width, config.max_height,
                            config.resample)
            scaled_size = working.size
            logger.debug("Scaled %s -> %s", before, scaled_size)

        logger.info("Extracting brightness map...")
        brightness = extract_brightness(working, self.progress,
                                        config.progress_interval)
        lines = brightness.lines(config.charset)

        return GenerationResult(
            text="".join(line + "\n" for line in lines),
            lines=lines,
            width=brightness.width,
            height=brightness.height,
            original_size=original_size,
            cropped_size=cropped_size,
            scaled_size=scaled_size,
        )


def image_to_ascii(image: Image.Image,
                   max_width: Optional[int] = None,
                   max_height: Optional[int] = None,
                   crop: bool = False,
                   charset: str = DEFAULT_RAMP,
                   **kwargs) -> str:
    """
    Convenience function to convert an image to ASCII art.

    Args:
        image: PIL Image
        max_width: Maximum output width (None for no limit)
        max_height: Maximum output height (None for no limit)
        crop: Remove blank borders first
        charset: Characters from darkest to lightest
        **kwargs: Additional config options

    Returns:
        The rendered text
    """
    config = GeneratorConfig(
        max_width=max_width,
        max_height=max_height,
        crop=crop,
        charset=charset,
        **kwargs
    )
    return AsciiArtGenerator(config).generate(image).text
