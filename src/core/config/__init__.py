# Configuration package

from src.core.config.app_config import AppConfig, LogLevel, load_config
from src.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
    ResolvedParameter,
)

__all__ = [
    "AppConfig",
    "LogLevel",
    "ParameterResolution",
    "ParameterSource",
    "ResolvedParameter",
    "load_config",
]
