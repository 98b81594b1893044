"""Logging configuration for applications using the service registry.

The package logs through loguru and is disabled on import, so nothing is
emitted until an application calls ``setup_logging``.
"""

import logging
import sys

from loguru import logger

from .settings import get_settings

PACKAGE_NAME = "service_registry"


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages toward loguru."""

    def emit(self, record):
        # Get corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str | None = None, colorize: bool | None = None) -> int:
    """Configure loguru and enable the service registry's log output.

    Args:
        log_level: Log level to use, defaults to ``Settings.log_level``
        colorize: Whether to colorize stderr output, defaults to ``Settings.log_colorize``

    Returns:
        The id of the loguru sink that was added
    """
    settings = get_settings()
    log_level = (log_level or settings.log_level).upper()
    if colorize is None:
        colorize = settings.log_colorize

    logger.remove()  # Remove default handler
    handler_id = logger.add(
        sys.stderr,
        level=log_level,
        colorize=colorize,
    )
    logger.enable(PACKAGE_NAME)

    logger.info(f"Log level set to: {log_level}")

    # Redirect all standard logging to loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return handler_id
