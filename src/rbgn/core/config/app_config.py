from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator

from rbgn.core.common.exceptions import ConfigurationError
from rbgn.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "RBGN_CONFIG"

_SHELL_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _env_to_bool(value: str) -> bool:
    """Parse an environment flag."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None


class ShellConfig(DomainModel):
    """Settings for the shell transpiler."""

    # Every script variable `x` becomes the shell variable `<prefix>x`.
    variable_prefix: str = "RUNTIME_"
    # Tag printed before each compiled line when no output file is given.
    console_prefix: str = "HRO | "
    shebang: str = "#!/usr/bin/env bash"

    @field_validator("variable_prefix")
    @classmethod
    def validate_variable_prefix(cls, v: str) -> str:
        """The prefix must start a valid shell identifier."""
        if not _SHELL_IDENTIFIER.fullmatch(v):
            raise ValueError(
                "Shell variable prefix must be a valid shell identifier"
            )
        return v


class RuntimeConfig(DomainModel):
    """Settings for the interpreter."""

    const_prefix: str = "_RBGN_INTERNAL_CONST_"

    @field_validator("const_prefix")
    @classmethod
    def validate_const_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("Constant prefix must not be empty")
        return v


class AppConfig(DomainModel):
    """Top-level application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    show_banner: bool = True

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from defaults and environment variables.

        Returns:
            AppConfig instance
        """
        data = AppConfig().model_dump()
        env = os.environ if environ is None else environ
        _merge_dicts(data, _env_overrides(env))
        return cls.model_validate(data)


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Collect configuration values set through environment variables."""
    overrides: dict[str, Any] = {}

    if "RBGN_LOG_LEVEL" in env:
        _set_by_path(overrides, "logging.level", env["RBGN_LOG_LEVEL"].upper())
    if "RBGN_LOG_FILE" in env:
        _set_by_path(overrides, "logging.log_file", env["RBGN_LOG_FILE"])
    if "RBGN_SHELL_VARIABLE_PREFIX" in env:
        _set_by_path(
            overrides, "shell.variable_prefix", env["RBGN_SHELL_VARIABLE_PREFIX"]
        )
    if "RBGN_CONSOLE_PREFIX" in env:
        _set_by_path(overrides, "shell.console_prefix", env["RBGN_CONSOLE_PREFIX"])
    if "RBGN_NO_BANNER" in env:
        overrides["show_banner"] = not _env_to_bool(env["RBGN_NO_BANNER"])

    return overrides


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _set_by_path(target: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current: dict[str, Any] = target
    for key in parts[:-1]:
        current = current.setdefault(key, {})
    current[parts[-1]] = value


def _read_config_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )
    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Error loading configuration file {path}: {exc}",
            details={"path": str(path)},
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping",
            details={"path": str(path)},
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment variables take precedence over the file, which takes
    precedence over the defaults.

    Args:
        config_path: Optional path to a YAML configuration file. Falls back to
            the RBGN_CONFIG environment variable.
        environ: Environment mapping, os.environ when omitted

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file is unreadable or the values are invalid
    """
    env = os.environ if environ is None else environ
    config_path = config_path or env.get(CONFIG_PATH_ENV)

    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            _merge_dicts(config_data, _read_config_file(path))
            logger.debug("Loaded configuration from %s", path)

    _merge_dicts(config_data, _env_overrides(env))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {exc}",
            details={"path": str(config_path) if config_path else None},
        ) from exc
