"""Logging configuration for source-format."""
import logging
import sys


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for source-format.

    Args:
        verbose: Enable verbose (INFO level) logging
        quiet: Enable quiet (ERROR only) logging
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("source_format")
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'source_format.')

    Returns:
        Logger instance
    """
    if not name.startswith("source_format."):
        name = f"source_format.{name}"
    return logging.getLogger(name)
