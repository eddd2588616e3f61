import logging
import os
import sys

VERBOSITY_ENV = "CSV_SPLITTER_VERBOSITY"

LEVEL_MAP = {
    'quiet': logging.WARNING,
    'normal': logging.INFO,
    'debug': logging.DEBUG
}


def setup_logger(name: str, verbosity: str = None) -> logging.Logger:
    """
    Set up logger with consistent format and verbosity levels.

    Args:
        name: Logger name
        verbosity: 'quiet', 'normal', or 'debug'. Read from the
            CSV_SPLITTER_VERBOSITY environment variable when not given.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:  # Only configure if not already set up
        logger.propagate = False

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)

        if verbosity is None:
            verbosity = os.environ.get(VERBOSITY_ENV, 'normal')
        level = LEVEL_MAP.get(verbosity.lower(), logging.INFO)

        logger.setLevel(level)
        handler.setLevel(level)

        logger.addHandler(handler)
        logger.debug(f"Created logger '{name}' with level {logging.getLevelName(level)}")

    return logger
