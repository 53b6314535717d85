"""
Logging configuration for oas-codegen.

Sets up console logging once for the CLI and hands out module loggers.
The library modules only ever call get_logger(); nothing is configured
on import so embedding applications keep control of their handlers.
"""

import logging
import os
from typing import Optional


SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

DEFAULT_LOG_LEVEL = os.getenv("OAS_CODEGEN_LOG_LEVEL", "WARNING").upper()

# Third-party libraries (reduce noise)
MODULE_LOG_LEVELS = {
    "urllib3": "WARNING",
    "requests": "WARNING",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: str = "simple",
) -> None:
    """
    Configure console logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Either "simple" or "detailed"
    """
    level = (log_level or DEFAULT_LOG_LEVEL).upper()
    format_str = DETAILED_FORMAT if log_format == "detailed" else SIMPLE_FORMAT

    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.debug("Logging configured: level=%s, format=%s", level, log_format)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
