"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.log_level = log_level
        self.environment = environment or "local"
        self.config_path = config_path


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - MENTORMATCH_LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - MENTORMATCH_ENVIRONMENT: Environment label attached to log records (default: local)
    - MENTORMATCH_CONFIG: Path to the YAML configuration file

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("MENTORMATCH_LOG_LEVEL")
    environment = os.getenv("MENTORMATCH_ENVIRONMENT")
    config_path_str = os.getenv("MENTORMATCH_CONFIG")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"MENTORMATCH_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got: {log_level}"
            )
    else:
        log_level = None

    if environment is not None:
        environment = environment.strip() or None

    config_path = Path(config_path_str.strip()) if config_path_str and config_path_str.strip() else None

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the MENTORMATCH_* variables in your shell or .env file",
                "Unset a variable to fall back to the configuration file value",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level,
        environment=environment,
        config_path=config_path,
    )
