"""Configuration management module for Mentor Match."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AnonymousStrategy,
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    RankingConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "RankingConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "AnonymousStrategy",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
