"""Configuration for the DNP3 point list generator."""

from .settings import (
    ConfigError,
    ClassificationConfig,
    SparesConfig,
    AppConfig,
    DnpGenConfig,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_PATH,
    find_config_file,
    parse_config,
    load_config,
)

__all__ = [
    "ConfigError",
    "ClassificationConfig",
    "SparesConfig",
    "AppConfig",
    "DnpGenConfig",
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG_PATH",
    "find_config_file",
    "parse_config",
    "load_config",
]
