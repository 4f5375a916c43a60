# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and logging utilities for the typea library

from typea.config._base import BaseTypeaSettings
from typea.config.settings import TypeaSettings, get_settings
from typea.config.logging import (
    LoggerConfig,
    LoggingSettings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "BaseTypeaSettings",
    "TypeaSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
