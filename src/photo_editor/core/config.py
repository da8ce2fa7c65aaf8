"""Load save settings from plain mappings and environment variables."""

import os
from typing import Any, Dict, Mapping, Optional

from .exceptions import with_error_handling
from .logging_config import get_logger
from .models import SaveSettings

DEFAULT_ENV_PREFIX = "PHOTO_EDITOR_SAVE_"

logger = get_logger("config")


@with_error_handling
def load_save_settings(data: Mapping[str, Any]) -> SaveSettings:
    """
    Validate a mapping (e.g. parsed JSON) into SaveSettings.

    Args:
        data: Field names mapped to values; missing fields keep their defaults

    Returns:
        Frozen SaveSettings instance

    Raises:
        ConfigurationError: On unknown keys or values of the wrong type
    """
    return SaveSettings.model_validate(dict(data))


def save_settings_from_env(
    prefix: str = DEFAULT_ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> SaveSettings:
    """
    Build SaveSettings from environment variables.

    Args:
        prefix: Variable name prefix (defaults to "PHOTO_EDITOR_SAVE_")
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Frozen SaveSettings instance

    Environment Variables:
        <prefix>TRANSPARENCY_ENABLED: true/false
        <prefix>CLEAR_VIEWS_ENABLED: true/false
        <prefix>COMPRESS_FORMAT: png, jpeg (jpg) or webp
        <prefix>COMPRESS_QUALITY: integer, 0-100
        <prefix>WIDTH, <prefix>HEIGHT: render size override
    """
    if environ is None:
        environ = os.environ

    data: Dict[str, Any] = {}
    for field_name in SaveSettings.model_fields:
        raw = environ.get(prefix + field_name.upper())
        if raw is not None and raw.strip():
            data[field_name] = raw.strip()

    logger.debug(f"Save settings read from environment: {sorted(data)}")
    return load_save_settings(data)
