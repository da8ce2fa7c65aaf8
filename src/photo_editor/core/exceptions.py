"""Custom exceptions and error handling utilities for the photo editor."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from .logging_config import get_logger


class PhotoEditorError(Exception):
    """Base exception for all photo editor errors."""


class ConfigurationError(PhotoEditorError, ValueError):
    """Error raised for invalid save settings or option values."""


F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Wrap a settings operation with standardized error handling.

    Package errors are logged and re-raised unchanged. Validation failures
    coming out of pydantic, and plain ``ValueError`` raised while coercing
    option values, surface as :class:`ConfigurationError`.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:  # type: ignore[override]
        logger = get_logger(func.__module__.rsplit(".", 1)[-1])
        try:
            return func(*args, **kwargs)
        except PhotoEditorError:
            logger.error("Photo editor error", exc_info=True)
            raise
        except ValidationError as exc:
            logger.error(f"Invalid save settings in {func.__name__}: {exc}")
            raise ConfigurationError(str(exc)) from exc
        except ValueError as exc:
            logger.error(f"Invalid value in {func.__name__}: {exc}")
            raise ConfigurationError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
