"""Configuration module for buildfs.

This module provides YAML configuration parsing and validation for buildfs.yaml.
"""

from buildfs.config.parser import (
    DEFAULT_CONFIG_NAME,
    ExcludeConfig,
    EngineConfig,
    ConfigError,
    parse_config,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ExcludeConfig",
    "EngineConfig",
    "ConfigError",
    "parse_config",
    "load_config",
]
