"""Logging configuration for nbody_sim."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "nbody_sim.console"


def setup_logging(level: Optional[str] = "WARNING", name: str = "nbody_sim") -> logging.Logger:
    """
    Set up console logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or "WARNING").upper(), logging.WARNING))

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
