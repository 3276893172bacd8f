"""Logging setup.

Modules log through `logging.getLogger(__name__)`; this helper only
configures the package root logger once.
"""

import logging
from typing import Optional

from svgdoc.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "svgdoc"


def configure_logging(
    level: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Level name (default from settings, typically INFO)
        handler: Handler to install. Defaults to a stderr StreamHandler.

    Returns:
        The configured `svgdoc` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or settings.log_level).upper())

    # Replace rather than stack handlers on repeated calls
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
