"""Exceptions raised by the ASCII art pipeline and its command line."""

from typing import Dict


class AsciiArtError(Exception):
    """Base class for all errors raised by this package."""


class ArgumentError(AsciiArtError):
    """Command line arguments are malformed or conflicting."""


class ImageLoadError(AsciiArtError):
    """The input file could not be decoded as an image."""


class ScaleError(AsciiArtError, ValueError):
    """The requested bounds produce an image with no pixels."""


class CropError(AsciiArtError):
    """The crop box could not be applied to the image.

    Attributes:
        bounds: The six values computed while looking for the box.
    """

    def __init__(self, bounds: Dict[str, int]):
        self.bounds = dict(bounds)
        super().__init__(
            "Cannot crop image: topmost={topmost} bottommost={bottommost} "
            "leftmost={leftmost} rightmost={rightmost} cropped_width={cropped_width} "
            "cropped_height={cropped_height}".format(**self.bounds)
        )
