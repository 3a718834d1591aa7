"""Project-wide logger configuration."""
import logging
import sys

LOGGER_NAME: str = "arithmetic_evaluator"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the shared project logger with a single stderr handler.

    :return: Configured logger
    :rtype: logging.Logger
    """
    _logger = logging.getLogger(LOGGER_NAME)
    # Re-importing the module must not stack duplicate handlers
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(logging.INFO)
    return _logger


logger: logging.Logger = _build_logger()
