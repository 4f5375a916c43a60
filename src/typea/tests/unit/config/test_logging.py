# ABOUTME: Unit tests for loguru setup helpers
# ABOUTME: Checks sink wiring, file creation and bound logger names

from unittest.mock import patch

import pytest
from loguru import logger

from typea.config.logging import (
    LoggerConfig,
    LoggingSettings,
    configure_for_development,
    configure_for_production,
    configure_for_testing,
    get_logger,
    setup_logging,
)


class TestLoggingSetup:
    """Test cases for logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        configure_for_testing()

    @pytest.mark.unit
    def test_logging_settings_defaults(self):
        settings = LoggingSettings()
        assert settings.log_level == "INFO"
        assert settings.log_file_enabled is False
        assert settings.log_structured_enabled is False

    @pytest.mark.unit
    def test_file_sinks_created(self, tmp_path):
        config = LoggerConfig(
            console_enabled=False,
            file_path=tmp_path / "logs" / "typea.log",
            structured_path=tmp_path / "logs" / "typea.jsonl",
            error_file_path=tmp_path / "logs" / "errors.log",
        )
        setup_logging(config)

        get_logger("tests.logging").error("boom")
        logger.complete()

        assert (tmp_path / "logs" / "typea.log").read_text().count("boom") == 1
        assert "boom" in (tmp_path / "logs" / "errors.log").read_text()
        assert "tests.logging" in (tmp_path / "logs" / "typea.jsonl").read_text()

    @pytest.mark.unit
    def test_get_logger_binds_name(self):
        messages = []
        logger.remove()
        logger.add(lambda m: messages.append(m.record["extra"]["name"]), level="DEBUG")

        get_logger("typea.sample").info("hello")

        assert messages == ["typea.sample"]


class TestLoggingPresets:
    """Test cases for the environment presets."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        configure_for_testing()

    @pytest.mark.unit
    def test_production_preset(self):
        with patch("typea.config.logging.setup_logging") as mock_setup:
            configure_for_production()

        config = mock_setup.call_args.args[0]
        assert config.console_level == "INFO"
        assert config.console_colorize is False
        assert config.console_diagnose is False
        assert config.structured_enabled is True
        assert config.error_file_enabled is True
        assert config.enqueue is True

    @pytest.mark.unit
    def test_development_preset(self):
        with patch("typea.config.logging.setup_logging") as mock_setup:
            configure_for_development()

        config = mock_setup.call_args.args[0]
        assert config.console_level == "DEBUG"
        assert config.console_colorize is True
        assert config.console_diagnose is True
        assert config.structured_enabled is True
        assert config.enqueue is False

    @pytest.mark.unit
    def test_production_preset_writes_sinks(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_for_production()
        get_logger("tests.presets").error("preset failure")
        logger.complete()

        assert "preset failure" in (tmp_path / "logs" / "typea.log").read_text()
        assert "preset failure" in (tmp_path / "logs" / "typea-errors.log").read_text()
        assert "tests.presets" in (tmp_path / "logs" / "typea-structured.jsonl").read_text()
