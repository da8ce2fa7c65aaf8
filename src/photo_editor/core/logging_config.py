"""Centralized logging configuration for the photo editor.

All package loggers live under a single ``photo-editor`` parent. Only the
parent carries a handler; component loggers (``photo-editor.models``,
``photo-editor.config``) propagate to it.
"""

import os
import sys
import logging
from typing import Optional

ROOT_LOGGER_NAME = "photo-editor"
HANDLER_NAME = "photo-editor-stdout"

STRUCTURED_FORMAT = (
    "%(asctime)s | %(name)s | %(levelname)-8s | "
    "%(filename)s:%(lineno)d | %(funcName)s() | %(message)s"
)
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _package_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    # Other tooling (e.g. test log capture) may attach its own handlers
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logger(
    level: Optional[str] = None,
    format_type: str = "structured",
) -> logging.Logger:
    """
    Configure the ``photo-editor`` parent logger.

    Calling it again reconfigures level and format in place; the stdout
    handler is installed only once.

    Args:
        level: Log level override (defaults to env var or INFO)
        format_type: Logging format ("structured" or "simple")

    Returns:
        The configured parent logger

    Environment Variables:
        LOG_LEVEL: Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_FORMAT: Set format type ("structured" or "simple")
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Determine log level from parameter, env var, or default
    if level:
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        env_level = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, env_level, logging.INFO)

    logger.setLevel(log_level)

    handler = _package_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    # Env var wins over the parameter, as for the level
    env_format = os.getenv("LOG_FORMAT", format_type).lower()
    if env_format == "structured":
        formatter = logging.Formatter(STRUCTURED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(SIMPLE_FORMAT)
    handler.setFormatter(formatter)

    # Keep package output off the root logger
    logger.propagate = False
    return logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Get the parent logger, or the ``photo-editor.<component>`` child.

    The parent is configured on first use. Children carry no handlers of
    their own.
    """
    parent = logging.getLogger(ROOT_LOGGER_NAME)
    if _package_handler(parent) is None:
        setup_logger()
    if not component:
        return parent
    return parent.getChild(component)
