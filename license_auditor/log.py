"""Process-wide logging setup for the command-line interface."""
from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(levelname)s %(message)s"


def configure_logging(no_color: bool = False, quiet: bool = False) -> None:
    """Configure the ``license_auditor`` logger.

    Args:
        no_color: Use a plain stream handler instead of Rich colors.
        quiet: Only log errors, hiding approved and exceptioned packages.
    """
    logger = logging.getLogger("license_auditor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler: logging.Handler
    if no_color:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True, force_terminal=True),
            show_time=False,
            show_path=False,
        )

    logger.addHandler(handler)
    logger.setLevel(logging.ERROR if quiet else logging.INFO)
