# ABOUTME: Unit tests for TypeaSettings composition and the cached accessor
# ABOUTME: Verifies inheritance and singleton behaviour of get_settings

import os
from unittest.mock import patch

import pytest

from typea.config._base import BaseTypeaSettings
from typea.config.settings import TypeaSettings, get_settings


class TestTypeaSettings:
    """Test suite for TypeaSettings class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_inherits_base_settings(self):
        settings = TypeaSettings()
        assert isinstance(settings, BaseTypeaSettings)
        assert settings.APP_NAME == "Typea"

    @pytest.mark.unit
    @pytest.mark.config
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.unit
    @pytest.mark.config
    def test_cache_clear_reloads_environment(self):
        first = get_settings()
        with patch.dict(os.environ, {"TYPEA_TIMEZONE": "Asia/Tokyo"}):
            get_settings.cache_clear()
            second = get_settings()

        assert first is not second
        assert second.TIMEZONE == "Asia/Tokyo"
