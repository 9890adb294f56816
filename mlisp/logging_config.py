"""Logging configuration for mlisp."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", stream: Optional[object] = None) -> None:
    """
    Configure logging for the REPL process.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Unknown names fall back to WARNING.
        stream: Where to write records. Defaults to stderr so log lines never
                interleave with program output on stdout.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
    )
    logging.getLogger(__name__).debug("Logging initialized at %s level", level.upper())
