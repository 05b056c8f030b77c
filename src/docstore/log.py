"""Logging setup for command-line entry points"""

import logging


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send records at `level` and above to stderr. Library modules only create loggers."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
