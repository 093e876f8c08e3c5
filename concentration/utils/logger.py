"""Logging utilities."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Log records go to stderr so they never mix with the console game on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
