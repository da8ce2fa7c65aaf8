"""Save settings models for the photo editor."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .exceptions import ConfigurationError, with_error_handling
from .logging_config import get_logger

MIN_COMPRESS_QUALITY = 0
MAX_COMPRESS_QUALITY = 100

logger = get_logger("models")


class CompressFormat(str, Enum):
    """Output codec used when the edited image is encoded."""

    PNG = "PNG"
    JPEG = "JPEG"
    WEBP = "WEBP"

    @classmethod
    def parse(cls, value: Union["CompressFormat", str]) -> "CompressFormat":
        """
        Resolve a format from a member or a case-insensitive name.

        Args:
            value: CompressFormat member or name such as "png", "jpg", "WEBP"

        Returns:
            Matching CompressFormat member

        Raises:
            ConfigurationError: If the name does not denote a known format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "JPG":
                name = "JPEG"
            if name in cls.__members__:
                return cls[name]
        raise ConfigurationError(
            f"Unknown compress format: {value!r} "
            f"(expected one of {', '.join(cls.__members__)})"
        )

    @property
    def is_lossless(self) -> bool:
        return self is CompressFormat.PNG

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def mime_type(self) -> str:
        return f"image/{self.value.lower()}"


_EXTENSIONS = {
    CompressFormat.PNG: ".png",
    CompressFormat.JPEG: ".jpg",
    CompressFormat.WEBP: ".webp",
}


class SaveSettings(BaseModel):
    """
    Options applied when the edited image is saved.

    Instances are frozen once constructed. Build them directly with keyword
    arguments or fluently through :class:`SaveSettingsBuilder`.

    Attributes:
        transparency_enabled: Keep the alpha channel when encoding
        clear_views_enabled: Remove overlay views from the editor once saved
        compress_format: Output codec
        compress_quality: Encoder quality, intended range 0-100 (not enforced)
        width: Render width override, None for the natural surface width
        height: Render height override, None for the natural surface height
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    transparency_enabled: bool = True
    clear_views_enabled: bool = True
    compress_format: CompressFormat = CompressFormat.PNG
    compress_quality: int = MAX_COMPRESS_QUALITY
    width: Optional[int] = None
    height: Optional[int] = None

    @field_validator("compress_format", mode="before")
    @classmethod
    def _parse_compress_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return CompressFormat.parse(value)
        return value

    @model_validator(mode="after")
    def _warn_on_suspicious_values(self) -> "SaveSettings":
        # Out-of-range quality is passed through; the encoder decides.
        if not MIN_COMPRESS_QUALITY <= self.compress_quality <= MAX_COMPRESS_QUALITY:
            logger.warning(
                f"compress_quality={self.compress_quality} is outside "
                f"[{MIN_COMPRESS_QUALITY}, {MAX_COMPRESS_QUALITY}]"
            )
        if (self.width is None) != (self.height is None):
            logger.warning(
                f"Partial size override (width={self.width}, height={self.height}); "
                "the natural size will be used"
            )
        return self

    @classmethod
    def builder(cls) -> "SaveSettingsBuilder":
        """Return a new builder holding the default settings."""
        return SaveSettingsBuilder()

    def to_builder(self) -> "SaveSettingsBuilder":
        """Return a builder seeded with these settings."""
        builder = SaveSettingsBuilder()
        builder.transparency_enabled = self.transparency_enabled
        builder.clear_views_enabled = self.clear_views_enabled
        builder.compress_format = self.compress_format
        builder.compress_quality = self.compress_quality
        builder.width = self.width
        builder.height = self.height
        return builder

    @property
    def has_size_override(self) -> bool:
        return self.width is not None and self.height is not None

    def resolve_size(self, natural_width: int, natural_height: int) -> Tuple[int, int]:
        """
        Return the size the image should be rendered at.

        Args:
            natural_width: Width of the editor surface
            natural_height: Height of the editor surface

        Returns:
            (width, height) override when both are set, else the natural size
        """
        if self.has_size_override:
            return self.width, self.height  # type: ignore[return-value]
        return natural_width, natural_height

    def encoder_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``PIL.Image.Image.save``."""
        options: Dict[str, Any] = {"format": self.compress_format.value}
        if not self.compress_format.is_lossless:
            options["quality"] = self.compress_quality
        return options


class SaveSettingsBuilder:
    """Fluent, mutable accumulator for :class:`SaveSettings`.

    Not synchronized; guard it externally if it is shared between threads.
    """

    def __init__(self) -> None:
        self.transparency_enabled: bool = True
        self.clear_views_enabled: bool = True
        self.compress_format: CompressFormat = CompressFormat.PNG
        self.compress_quality: int = MAX_COMPRESS_QUALITY
        self.width: Optional[int] = None
        self.height: Optional[int] = None

    def set_transparency_enabled(self, transparency_enabled: bool) -> "SaveSettingsBuilder":
        """Keep (True) or flatten (False) the alpha channel while saving."""
        self.transparency_enabled = transparency_enabled
        return self

    def set_clear_views_enabled(self, clear_views_enabled: bool) -> "SaveSettingsBuilder":
        """Clear overlay views from the editor after the image is saved."""
        self.clear_views_enabled = clear_views_enabled
        return self

    def set_compress_format(
        self, compress_format: Union[CompressFormat, str]
    ) -> "SaveSettingsBuilder":
        """Set the output codec: PNG, JPEG or WEBP."""
        self.compress_format = CompressFormat.parse(compress_format)
        return self

    def set_compress_quality(self, compress_quality: int) -> "SaveSettingsBuilder":
        """Set the encoder quality, a number between 0 and 100."""
        self.compress_quality = compress_quality
        return self

    def set_size(self, width: int, height: int) -> "SaveSettingsBuilder":
        """Override the render size; otherwise the editor surface size is used."""
        self.width = width
        self.height = height
        return self

    @with_error_handling
    def build(self) -> SaveSettings:
        """Snapshot the current builder state into a frozen SaveSettings."""
        settings = SaveSettings(
            transparency_enabled=self.transparency_enabled,
            clear_views_enabled=self.clear_views_enabled,
            compress_format=self.compress_format,
            compress_quality=self.compress_quality,
            width=self.width,
            height=self.height,
        )
        logger.debug(f"Built save settings: {settings!r}")
        return settings
