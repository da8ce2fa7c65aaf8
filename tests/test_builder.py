"""Tests for the fluent SaveSettings builder."""

from unittest.mock import patch

import pytest

from photo_editor.core import models
from photo_editor.core.exceptions import ConfigurationError
from photo_editor.core.models import CompressFormat, SaveSettings, SaveSettingsBuilder


class TestSaveSettingsBuilder:
    """Tests for SaveSettingsBuilder."""

    def test_build_without_setters_yields_defaults(self):
        settings = SaveSettingsBuilder().build()
        assert settings.transparency_enabled is True
        assert settings.clear_views_enabled is True
        assert settings.compress_format is CompressFormat.PNG
        assert settings.compress_quality == 100
        assert settings.width is None
        assert settings.height is None

    def test_builder_classmethod_returns_fresh_builder(self):
        builder = SaveSettings.builder()
        assert isinstance(builder, SaveSettingsBuilder)
        assert builder.build() == SaveSettings()

    def test_setters_return_builder_for_chaining(self):
        builder = SaveSettingsBuilder()
        assert builder.set_transparency_enabled(False) is builder
        assert builder.set_clear_views_enabled(False) is builder
        assert builder.set_compress_format(CompressFormat.JPEG) is builder
        assert builder.set_compress_quality(50) is builder
        assert builder.set_size(1, 2) is builder

    @pytest.mark.parametrize("flag", [True, False])
    def test_transparency_flag_passes_through(self, flag):
        assert SaveSettingsBuilder().set_transparency_enabled(flag).build().transparency_enabled is flag

    @pytest.mark.parametrize("flag", [True, False])
    def test_clear_views_flag_passes_through(self, flag):
        assert SaveSettingsBuilder().set_clear_views_enabled(flag).build().clear_views_enabled is flag

    @pytest.mark.parametrize("compress_format", list(CompressFormat))
    def test_compress_format_passes_through(self, compress_format):
        settings = SaveSettingsBuilder().set_compress_format(compress_format).build()
        assert settings.compress_format is compress_format

    def test_compress_format_accepts_name(self):
        settings = SaveSettingsBuilder().set_compress_format("webp").build()
        assert settings.compress_format is CompressFormat.WEBP

    def test_compress_format_rejects_unknown_name(self):
        with pytest.raises(ConfigurationError):
            SaveSettingsBuilder().set_compress_format("tiff")

    @pytest.mark.parametrize("quality", [-20, 0, 85, 100, 255])
    def test_compress_quality_passes_through_unmodified(self, quality):
        with patch.object(models.logger, "warning"):
            settings = SaveSettingsBuilder().set_compress_quality(quality).build()
        assert settings.compress_quality == quality

    def test_out_of_range_quality_warns_on_build(self):
        builder = SaveSettingsBuilder()
        with patch.object(models.logger, "warning") as mock_warning:
            builder.set_compress_quality(-1)
            mock_warning.assert_not_called()
            builder.build()
        mock_warning.assert_called_once()

    @pytest.mark.parametrize("width, height", [(1080, 1920), (0, 0), (-5, 7)])
    def test_set_size_sets_both_dimensions(self, width, height):
        settings = SaveSettingsBuilder().set_size(width, height).build()
        assert settings.width == width
        assert settings.height == height

    def test_build_produces_independent_snapshots(self):
        builder = SaveSettingsBuilder().set_compress_quality(90)
        first = builder.build()

        builder.set_compress_quality(40).set_compress_format(CompressFormat.JPEG).set_size(10, 10)
        second = builder.build()

        assert first.compress_quality == 90
        assert first.compress_format is CompressFormat.PNG
        assert first.width is None and first.height is None
        assert second.compress_quality == 40
        assert second.compress_format is CompressFormat.JPEG
        assert (second.width, second.height) == (10, 10)
        assert first is not second

    def test_invalid_flag_type_raises_configuration_error(self):
        builder = SaveSettingsBuilder().set_transparency_enabled("sometimes")
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_jpeg_export_scenario(self):
        settings = (
            SaveSettingsBuilder()
            .set_compress_format(CompressFormat.JPEG)
            .set_compress_quality(85)
            .set_size(1080, 1920)
            .set_clear_views_enabled(False)
            .build()
        )
        assert settings == SaveSettings(
            transparency_enabled=True,
            clear_views_enabled=False,
            compress_format=CompressFormat.JPEG,
            compress_quality=85,
            width=1080,
            height=1920,
        )
        assert settings.encoder_options() == {"format": "JPEG", "quality": 85}
        assert settings.resolve_size(720, 1280) == (1080, 1920)
