"""YAML configuration parser for buildfs.

This module provides parsing and validation for buildfs.yaml configuration files.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from buildfs.core.exceptions import ConfigError
from buildfs.core.matcher import DEFAULT_EXCLUDE_DIRS
from buildfs.core.search import DEFAULT_LD_SO_CONF, DEFAULT_SEARCH_ENV

DEFAULT_CONFIG_NAME = "buildfs.yaml"


@dataclass
class ExcludeConfig:
    """Default exclude rules for wildcard matching."""

    dirs: Optional[str] = DEFAULT_EXCLUDE_DIRS
    files: Optional[str] = None


@dataclass
class EngineConfig:
    """Complete buildfs configuration."""

    version: int = 1
    os: Optional[str] = None  # Override of the host OS id
    scripts: Optional[str] = None  # Script search path-list for locate()
    search_env: str = DEFAULT_SEARCH_ENV
    ld_so_conf: str = DEFAULT_LD_SO_CONF
    exclude: ExcludeConfig = field(default_factory=ExcludeConfig)


def parse_config(config_path: Path) -> EngineConfig:
    """
    Parse buildfs.yaml configuration file.

    Args:
        config_path: Path to buildfs.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def load_config(config_path: Optional[Path] = None) -> EngineConfig:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Explicit configuration file. If None, ./buildfs.yaml
            is used when present.

    Returns:
        Parsed configuration, or defaults if no file was found

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_path = Path.cwd() / DEFAULT_CONFIG_NAME
    if default_path.exists():
        return parse_config(default_path)

    return EngineConfig()


def _parse_and_validate(data: dict) -> EngineConfig:
    """Parse and validate configuration data."""
    version = data.get("version", 1)
    if version != 1:
        raise ConfigError(f"Unsupported version: {version} (expected 1)")

    os_id = _optional_str(data, "os")
    scripts = data.get("scripts")
    if isinstance(scripts, list):
        # A list of directories is accepted as well as a path-list string
        if not all(isinstance(entry, str) for entry in scripts):
            raise ConfigError("scripts entries must be strings")
        scripts = ";".join(scripts)
    elif scripts is not None and not isinstance(scripts, str):
        raise ConfigError("scripts must be a string or a list of strings")

    search_env = _optional_str(data, "search_env") or DEFAULT_SEARCH_ENV
    ld_so_conf = _optional_str(data, "ld_so_conf") or DEFAULT_LD_SO_CONF

    return EngineConfig(
        version=version,
        os=os_id.lower() if os_id else None,
        scripts=scripts,
        search_env=search_env,
        ld_so_conf=ld_so_conf,
        exclude=_parse_exclude(data.get("exclude", {})),
    )


def _parse_exclude(data: Optional[dict]) -> ExcludeConfig:
    """Parse exclude rules."""
    if data is None:
        return ExcludeConfig()

    if not isinstance(data, dict):
        raise ConfigError("exclude must be a mapping")

    exclude = ExcludeConfig(
        dirs=data.get("dirs", DEFAULT_EXCLUDE_DIRS),
        files=data.get("files"),
    )

    for field_name in ("dirs", "files"):
        rule = getattr(exclude, field_name)
        if rule is None:
            continue
        if not isinstance(rule, str):
            raise ConfigError(f"exclude.{field_name} must be a string")
        try:
            re.compile(rule)
        except re.error as e:
            raise ConfigError(f"Invalid exclude.{field_name} pattern {rule!r}: {e}")

    return exclude


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ExcludeConfig",
    "EngineConfig",
    "ConfigError",
    "parse_config",
    "load_config",
]
