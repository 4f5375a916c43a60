# ABOUTME: Loguru configuration for the typea library
# ABOUTME: Provides unified logging setup with console colorization and file output

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = True
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/typea.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Structured logging for file output
    structured_enabled: bool = True
    structured_level: str = "DEBUG"
    structured_path: Union[str, Path] = "logs/typea-structured.jsonl"
    structured_format: str = "{message}"
    structured_serialize: bool = True

    # Error file output
    error_file_enabled: bool = True
    error_file_level: str = "ERROR"
    error_file_path: Union[str, Path] = "logs/typea-errors.log"

    # Performance settings
    enqueue: bool = False
    catch: bool = True  # Catch exceptions in logging


class LoggingSettings(BaseSettings):
    """Logging settings that can be configured via environment variables."""

    log_level: str = Field(default="INFO", validation_alias="TYPEA_LOG_LEVEL")
    log_file_enabled: bool = Field(default=False, validation_alias="TYPEA_LOG_FILE_ENABLED")
    log_file_path: str = Field(default="logs/typea.log", validation_alias="TYPEA_LOG_FILE_PATH")
    log_structured_enabled: bool = Field(default=False, validation_alias="TYPEA_LOG_STRUCTURED_ENABLED")
    log_console_colorize: bool = Field(default=True, validation_alias="TYPEA_LOG_CONSOLE_COLORIZE")


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    Args:
        config: Logger configuration. If None, the configuration is read from
            ``TYPEA_LOG_*`` environment variables.
    """
    if config is None:
        settings = LoggingSettings()
        config = LoggerConfig(
            console_level=settings.log_level,
            file_enabled=settings.log_file_enabled,
            file_path=settings.log_file_path,
            structured_enabled=settings.log_structured_enabled,
            error_file_enabled=settings.log_file_enabled,
            console_colorize=settings.log_console_colorize,
            file_level=settings.log_level,
            structured_level=settings.log_level,
        )

    logger.remove()
    # Records logged through the bare logger still render {extra[name]}
    logger.configure(extra={"name": "typea"})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        _add_file_sink(config, config.file_path, config.file_level, config.file_format, config.file_serialize)
    if config.structured_enabled:
        _add_file_sink(
            config,
            config.structured_path,
            config.structured_level,
            config.structured_format,
            config.structured_serialize,
        )
    if config.error_file_enabled:
        _add_file_sink(config, config.error_file_path, config.error_file_level, config.file_format, False)


def _add_file_sink(config: LoggerConfig, path: Union[str, Path], level: str, fmt: str, serialize: bool) -> None:
    # Rotation, retention and compression are shared by every file sink
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(path),
        level=level,
        format=fmt,
        serialize=serialize,
        rotation=config.file_rotation,
        retention=config.file_retention,
        compression=config.file_compression,
        enqueue=config.enqueue,
        catch=config.catch,
    )


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.configure(extra={"name": "typea"})
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{extra[name]}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_backtrace=False,
        console_diagnose=False,
        file_level="DEBUG",
        structured_enabled=True,
        error_file_enabled=True,
        enqueue=True,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
        file_level="DEBUG",
        structured_enabled=True,
        error_file_enabled=True,
    )
    setup_logging(config)


# Default setup - can be overridden by applications
setup_logging()
