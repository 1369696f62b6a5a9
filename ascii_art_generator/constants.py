#!/usr/bin/env python3
"""
ASCII Art Generator - Constants
===============================
Character ramps, exit codes and pipeline defaults.
"""

from enum import IntEnum


# =============================================================================
# CHARACTER RAMPS
# =============================================================================

# Darkest on the left, lightest on the right
DEFAULT_RAMP = "@%#*+=-;:,. "

# Rows between two progress notifications while extracting brightness
PROGRESS_INTERVAL = 20


# =============================================================================
# EXIT CODES
# =============================================================================

class ExitCode(IntEnum):
    """Process exit codes of the command line tool."""
    SUCCESS = 0             # Processing successful
    NOT_FOUND = 1           # Input file not found
    IMAGE_INVALID = 2       # Input file is not a valid image
    INVALID_ARGUMENTS = 3   # Argument combination is invalid
    CANT_WRITE = 4          # Can't write to output file
    HELP = 5                # Help shown
