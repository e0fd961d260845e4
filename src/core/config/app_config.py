from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ConfigDict, ValidationError, field_validator

from src.core.common.exceptions import ConfigurationError
from src.core.config.parameter_resolution import ParameterResolution, ParameterSource
from src.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_NAME = "dissect-opts"

ENV_PROGRAM_NAME = "DISSECT_PROGRAM_NAME"
ENV_LOG_LEVEL = "DISSECT_LOG_LEVEL"
ENV_LOG_FILE = "DISSECT_LOG_FILE"
ENV_KERBEROS = "DISSECT_KERBEROS"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        return logging.getLevelName(self.value)  # type: ignore[no-any-return]


def _env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    *,
    path: str,
    resolution: ParameterResolution | None = None,
    transform: Callable[[str], Any] | None = None,
) -> tuple[bool, Any]:
    """Return whether ``name`` is set and its value, recording its source."""

    if name not in env:
        return False, None
    raw_value = env[name]
    value = transform(raw_value) if transform is not None else raw_value
    if resolution is not None:
        resolution.record(path, value, ParameterSource.ENVIRONMENT, origin=name)
    return True, value


class AppConfig(DomainModel):
    """Settings of the command-line front end."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    program_name: str = DEFAULT_PROGRAM_NAME
    log_level: LogLevel = LogLevel.WARNING
    log_file: str | None = None
    # Whether keytab files can be loaded for Kerberos decryption.
    kerberos_support: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("program_name")
    @classmethod
    def _validate_program_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("program_name must not be empty")
        return v

    @classmethod
    def from_env(
        cls,
        *,
        environ: Mapping[str, str] | None = None,
        resolution: ParameterResolution | None = None,
    ) -> dict[str, Any]:
        """Collect the settings present in the environment.

        Returns:
            Only the fields whose variables are set, keyed by field name.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name, path, transform in (
            (ENV_PROGRAM_NAME, "program_name", None),
            (ENV_LOG_LEVEL, "log_level", None),
            (ENV_LOG_FILE, "log_file", None),
            (ENV_KERBEROS, "kerberos_support", _env_to_bool),
        ):
            present, value = _get_env_value(
                env, name, path=path, resolution=resolution, transform=transform
            )
            if present:
                values[path] = value
        return values


def _load_config_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Could not read configuration file {path}: {exc}",
            details={"path": str(path)},
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping",
            details={"path": str(path)},
        )
    return data


def load_config(
    config_path: str | Path | None = None,
    *,
    resolution: ParameterResolution | None = None,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Later sources override earlier ones. When ``environ`` is not given the
    process environment is used, after loading a ``.env`` file if present.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid.
    """
    res = resolution or ParameterResolution()
    if environ is None:
        load_dotenv(dotenv_path)
        env: Mapping[str, str] = os.environ
    else:
        env = environ

    config_data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            file_config = _load_config_file(path)
            config_data.update(file_config)
            for name, value in file_config.items():
                res.record(name, value, ParameterSource.CONFIG_FILE, origin=str(path))

    config_data.update(AppConfig.from_env(environ=env, resolution=res))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {exc.errors()[0]['msg']}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
