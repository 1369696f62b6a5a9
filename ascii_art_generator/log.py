"""Logging setup for the command line tool."""

import logging
import sys

LOG = logging.getLogger("ascii_art_generator")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    LOG.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    LOG.handlers[:] = [handler]
    LOG.propagate = False       # prevent double logging via root logger
