#!/usr/bin/env python3
"""
ASCII Art Generator - Command Line
==================================
Parses slash-style arguments, runs the pipeline and writes the result.

Usage:
  ascii-art-generator [/W:size] [/H:size] [/C] [/V] <input> [output | -]
"""

import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ascii_art_generator.constants import ExitCode
from ascii_art_generator.errors import ArgumentError, CropError, ImageLoadError, ScaleError
from ascii_art_generator.generator import AsciiArtGenerator
from ascii_art_generator.image_io import default_output_path, open_image, write_output
from ascii_art_generator.log import setup_logging
from ascii_art_generator.models import GeneratorConfig

logger = logging.getLogger(__name__)

HELP_TEXT = """\
ascii-art-generator [/W:size] [/H:size] [/C] [/V] <input> [output | -]

ASCII Art Generator - Converts images to text files

/W:size - Downscale image to the specified width.
          Keep it below 1000 if the result is meant for a plain text editor.
/H:size - Downscale image to the specified height.
/C      - Crop blank borders from the image (white or transparent lines).
/V      - Verbose output.
input   - Source image file.
output  - Destination file. If not given, uses the name of the image with a
          .txt extension. An existing destination is overwritten.
-       - Write to stdout instead of to a file.

Note: When resizing, the aspect ratio of the image is always kept, so the
      sizes act as maximum bounds. Resizing a 1000x1000 image with /W:900
      and /H:800 results in an 800x800 image."""

HELP_FLAGS = ('--help', '-?', '/?')

# A slash, one letter, no further slash and no extension: "/W:80", "/Crop".
# Anything else starting with a slash is an absolute path.
OPTION_PATTERN = re.compile(r'^/[A-Za-z?][^/.]*(:[^/]*)?$')


@dataclass
class UserArgs:
    """Processed command line arguments."""
    width: Optional[int] = None         # Maximum width, None for no limit
    height: Optional[int] = None        # Maximum height, None for no limit
    in_file: Optional[str] = None       # Source image
    out_file: Optional[str] = None      # Destination file
    use_console: bool = False           # Write to stdout instead of a file
    crop: bool = False                  # Crop blank borders
    verbose: bool = False               # Debug logging
    show_help: bool = False             # Only print help


def _parse_size(arg: str) -> int:
    if len(arg) <= 3:
        raise ArgumentError(f"Argument missing a value: {arg}. Use /? for help.")
    if arg[2] != ':':
        raise ArgumentError(f"Invalid argument: {arg}. Use /? for help.")
    try:
        value = int(arg[3:])
    except ValueError:
        raise ArgumentError(f"Invalid argument: {arg}. Use /? for help.") from None
    if value < 1:
        raise ArgumentError(f"Size must be at least 1: {arg}. Use /? for help.")
    return value


def _parse_switch(arg: str, name: str) -> bool:
    if len(arg) != 2:
        raise ArgumentError(f"Invalid argument: {arg}. Did you mean '{name}'?")
    return True


def parse_args(argv: List[str]) -> UserArgs:
    """
    Check the raw arguments and fill a UserArgs structure.

    Args:
        argv: Arguments without the program name

    Returns:
        UserArgs; only ``show_help`` is meaningful if it is set

    Raises:
        ArgumentError: If an argument or the combination is invalid
    """
    args = UserArgs()

    if any(arg.lower() in HELP_FLAGS for arg in argv):
        args.show_help = True
        return args

    for arg in argv:
        if OPTION_PATTERN.match(arg):
            option = arg[:2].upper()
            if option == '/C':
                args.crop = _parse_switch(arg, '/C')
            elif option == '/V':
                args.verbose = _parse_switch(arg, '/V')
            elif option == '/W':
                args.width = _parse_size(arg)
            elif option == '/H':
                args.height = _parse_size(arg)
            else:
                raise ArgumentError(f"Unknown argument: {arg}. Use /? for help.")
        elif arg == '-':
            args.use_console = True
        elif not args.in_file:
            # Assume a file name at this point
            args.in_file = arg
        elif not args.out_file:
            args.out_file = arg
        else:
            raise ArgumentError(f"Unknown argument: {arg}. Use /? for help.")

    if args.out_file and args.use_console:
        raise ArgumentError("Conflict. Can't use output file and console output")
    if not args.in_file:
        raise ArgumentError("Missing input file argument")
    return args


def print_help() -> ExitCode:
    """Print the help text and return the matching exit code."""
    print(HELP_TEXT, file=sys.stderr)
    return ExitCode.HELP


class ProgressDots:
    """Write a dot to stderr for every progress notification."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr
        self.count = 0

    def __call__(self, row: int, height: int) -> None:
        self.stream.write('.')
        self.stream.flush()
        self.count += 1

    def finish(self) -> None:
        if self.count:
            self.stream.write('\n')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    if argv is None:
        argv = sys.argv[1:]

    setup_logging()

    if not argv:
        return print_help()

    try:
        args = parse_args(argv)
    except ArgumentError as e:
        logger.error("%s", e)
        print_help()
        return ExitCode.INVALID_ARGUMENTS

    if args.show_help:
        return print_help()
    if args.verbose:
        setup_logging(verbose=True)

    in_path = Path(args.in_file)
    if not in_path.is_file():
        logger.error("Image not found")
        return ExitCode.NOT_FOUND

    out_path = None
    if not args.use_console:
        out_path = Path(args.out_file) if args.out_file else default_output_path(in_path)

    config = GeneratorConfig(
        max_width=args.width,
        max_height=args.height,
        crop=args.crop,
    )
    progress = ProgressDots()
    generator = AsciiArtGenerator(config, progress=progress)

    logger.info("Reading image...")
    try:
        with open_image(in_path) as source:
            logger.debug("Size: %s, Mode: %s", source.size, source.mode)
            result = generator.generate(source)
    except FileNotFoundError:
        logger.error("Image not found")
        return ExitCode.NOT_FOUND
    except ImageLoadError as e:
        logger.error("Can't read image.\nError: %s", e.__cause__ or e)
        return ExitCode.IMAGE_INVALID
    except ScaleError as e:
        logger.error("%s", e)
        return ExitCode.INVALID_ARGUMENTS
    except CropError as e:
        logger.error("%s", e)
        raise
    finally:
        progress.finish()

    logger.debug("Output size: %dx%d", result.width, result.height)

    if args.use_console:
        logger.info("Dumping to console...")
        # The text already ends with a newline
        sys.stdout.write(result.text)
        sys.stdout.flush()
    else:
        logger.info("Writing output...")
        try:
            write_output(out_path, result.text)
        except OSError as e:
            logger.error("Can't write output. Check if file in use or read-only.\nError: %s", e)
            return ExitCode.CANT_WRITE

    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
