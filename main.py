#!/usr/bin/env python3
"""
Image to ASCII Art Converter
============================
Command line entry point. See ``ascii_art_generator.cli`` for the arguments.
"""

import sys

from ascii_art_generator.cli import main


if __name__ == "__main__":
    sys.exit(main())
