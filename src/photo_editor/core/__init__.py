"""Core models and shared components for the photo editor."""

from .logging_config import (
    get_logger,
    setup_logger,
)
from .exceptions import (
    PhotoEditorError,
    ConfigurationError,
    with_error_handling,
)
from .models import CompressFormat, SaveSettings, SaveSettingsBuilder
from .config import load_save_settings, save_settings_from_env

__all__ = [
    "CompressFormat",
    "SaveSettings",
    "SaveSettingsBuilder",
    "load_save_settings",
    "save_settings_from_env",
    "setup_logger",
    "get_logger",
    "PhotoEditorError",
    "ConfigurationError",
    "with_error_handling",
]
