#!/usr/bin/env python3
"""
ASCII Art Generator - Data Models
=================================
Brightness map, generator configuration and generation result.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image

from ascii_art_generator.constants import DEFAULT_RAMP, PROGRESS_INTERVAL


# =============================================================================
# BRIGHTNESS MAP
# =============================================================================

@dataclass(frozen=True, eq=False)
class BrightnessMap:
    """
    Brightness of every pixel of an image, row-major.

    Values range from 0.0 (dark) to 1.0 (light), both included.
    ``values[y * width + x]`` is the brightness of pixel ``(x, y)``.
    """
    width: int
    values: np.ndarray = field(repr=False)

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float32).reshape(-1)
        if self.width < 1:
            raise ValueError(f"Width must be positive, got: {self.width}")
        if values.size % self.width != 0:
            raise ValueError(
                f"{values.size} values do not fill rows of width {self.width}"
            )
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @property
    def height(self) -> int:
        """Number of rows, derived from the value count."""
        return self.values.size // self.width

    def lines(self, charset: str = DEFAULT_RAMP) -> List[str]:
        """
        Map every value to a character of the charset.

        Args:
            charset: Characters ordered from darkest to lightest

        Returns:
            One string of ``width`` characters per row, top row first
        """
        if not charset:
            raise ValueError("Charset must contain at least one character")

        num_chars = len(charset)
        indices = np.floor(self.values * (num_chars - 1)).astype(np.int64)
        indices = np.clip(indices, 0, num_chars - 1)

        lut = np.array(list(charset))
        chars = lut[indices].reshape(self.height, self.width)
        return ["".join(row) for row in chars]

    def as_string(self, charset: str = DEFAULT_RAMP) -> str:
        """Render the map as text, each line terminated by a newline."""
        return "".join(line + "\n" for line in self.lines(charset))


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """Configuration for ASCII art generation."""

    # Scale bounds: None or negative = unconstrained, 0 = never scale
    max_width: Optional[int] = None
    max_height: Optional[int] = None

    # Remove white or transparent borders before scaling
    crop: bool = False

    # Characters from darkest to lightest
    charset: str = DEFAULT_RAMP

    # Filter used when downscaling
    resample: Image.Resampling = Image.Resampling.BILINEAR

    # Rows between progress notifications
    progress_interval: int = PROGRESS_INTERVAL

    @property
    def scaling_requested(self) -> bool:
        """True if either bound asks for scaling (or explicitly disables it)."""
        return any(
            bound is not None and bound >= 0
            for bound in (self.max_width, self.max_height)
        )


@dataclass
class GenerationResult:
    """Result of ASCII art generation."""
    text: str                                   # The rendered text
    lines: List[str]                            # Lines without terminators
    width: int = 0                              # Characters per line
    height: int = 0                             # Number of lines
    original_size: Tuple[int, int] = (0, 0)     # Size of the source image
    cropped_size: Optional[Tuple[int, int]] = None  # Size after cropping
    scaled_size: Optional[Tuple[int, int]] = None   # Size after scaling
