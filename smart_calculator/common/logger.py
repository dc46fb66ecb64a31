"""Shared application logger."""
import logging
import sys

LOGGER_NAME = "smart_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

# Logs go to stderr so they never interleave with results printed on stdout
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.WARNING)


def configure_logging(level: str) -> None:
    """
    Set the level of the shared logger.

    :param str level: Standard logging level name (e.g. "INFO", "DEBUG")
    """
    logger.setLevel(level.upper())
