"""
Logging Configuration

Every sitegen module logs through a child of the "sitegen" logger
(registry counts, descriptor totals, files written). Those lines go to
stderr: stdout carries the build report of generate_sitemap.py and the
JSON of list_static_routes.py, which callers pipe into the renderer.
"""

import logging
import sys

LOGGER_NAME = "sitegen"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Route generator logging to stderr.

    Args:
        verbose: DEBUG level, adds per-stage descriptor counts
        quiet: WARNING level, only failures (verbose wins if both are set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Scripts may call this more than once; keep a single handler
    logger.handlers.clear()
    logger.addHandler(handler)
