"""
ASCII Art Generator
===================
Converts images to text: every pixel becomes one character of a brightness
ramp, optionally after cropping blank borders and scaling down.

    >>> from PIL import Image
    >>> from ascii_art_generator import image_to_ascii
    >>> print(image_to_ascii(Image.open('logo.png'), max_width=80, crop=True))
"""

from ascii_art_generator.brightness import extract_brightness
from ascii_art_generator.constants import DEFAULT_RAMP, ExitCode
from ascii_art_generator.cropper import crop
from ascii_art_generator.errors import (
    ArgumentError,
    AsciiArtError,
    CropError,
    ImageLoadError,
    ScaleError,
)
from ascii_art_generator.generator import AsciiArtGenerator, image_to_ascii
from ascii_art_generator.models import BrightnessMap, GenerationResult, GeneratorConfig
from ascii_art_generator.scaler import scale

__all__ = [
    'ArgumentError',
    'AsciiArtError',
    'AsciiArtGenerator',
    'BrightnessMap',
    'CropError',
    'DEFAULT_RAMP',
    'ExitCode',
    'GenerationResult',
    'GeneratorConfig',
    'ImageLoadError',
    'ScaleError',
    'crop',
    'extract_brightness',
    'image_to_ascii',
    'scale',
]
