"""Utilities for tracking configuration parameter origins and logging them."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParameterSource(Enum):
    """Enumeration of configuration sources ordered by precedence."""

    DEFAULT = "default"
    CONFIG_FILE = "config"
    ENVIRONMENT = "environment"
    CLI = "cli"


@dataclass
class _ParameterRecord:
    value: Any
    source: ParameterSource
    origin: str | None = None


@dataclass
class ResolvedParameter:
    """Represents the final resolved value for a configuration parameter."""

    name: str
    value: Any
    source: ParameterSource
    origin: str | None = None


class ParameterResolution:
    """Track configuration values and the source that supplied them.

    Repeated records for the same name are kept in order; the last one wins,
    matching how repeated command-line options behave.
    """

    _history: dict[str, list[_ParameterRecord]]

    def __init__(self) -> None:
        self._history = {}

    def record(
        self,
        name: str,
        value: Any,
        source: ParameterSource,
        *,
        origin: str | None = None,
    ) -> None:
        """Record that a parameter was set by a specific source."""

        entries = self._history.setdefault(name, [])
        entries.append(_ParameterRecord(value=value, source=source, origin=origin))

    def build_report(self, config: Any | None = None) -> list[ResolvedParameter]:
        """Build a report of resolved parameters.

        Fields of ``config`` that were never recorded are reported with the
        DEFAULT source; recorded names missing from ``config`` are reported
        with their last recorded value.
        """

        flattened = _flatten_config(config) if config is not None else {}
        report: list[ResolvedParameter] = []

        for name, value in flattened.items():
            records = self._history.get(name)
            if records:
                entry = records[-1]
                report.append(
                    ResolvedParameter(
                        name=name, value=value, source=entry.source, origin=entry.origin
                    )
                )
            else:
                report.append(
                    ResolvedParameter(name=name, value=value, source=ParameterSource.DEFAULT)
                )

        for name, records in self._history.items():
            if name in flattened:
                continue
            entry = records[-1]
            report.append(
                ResolvedParameter(
                    name=name, value=entry.value, source=entry.source, origin=entry.origin
                )
            )

        return sorted(report, key=lambda r: r.name)

    def log(
        self,
        logger: logging.Logger,
        config: Any | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        """Emit log entries describing each resolved configuration value."""

        for entry in self.build_report(config):
            origin_suffix = f" {entry.origin}" if entry.origin else ""
            logger.log(
                level,
                "Resolved parameter %s = %s (%s)",
                entry.name,
                _value_repr(entry.value),
                f"{entry.source.value}{origin_suffix}",
            )


def _flatten_config(config: Any) -> dict[str, Any]:
    """Convert a Pydantic model or mapping into a flat dict of dotted paths."""

    if hasattr(config, "model_dump"):
        data = config.model_dump(mode="json")
    elif isinstance(config, dict):
        data = config
    else:
        raise TypeError("Unsupported configuration object type")

    flattened: dict[str, Any] = {}

    def _walk(value: Any, prefix: str) -> None:
        if isinstance(value, dict):
            for key, item in value.items():
                new_prefix = f"{prefix}.{key}" if prefix else key
                _walk(item, new_prefix)
        else:
            flattened[prefix] = value

    _walk(data, "")
    return flattened


def _value_repr(value: Any) -> str:
    if isinstance(value, dict | list):
        return json.dumps(value, sort_keys=True, default=str)
    return repr(value)


__all__ = [
    "ParameterResolution",
    "ParameterSource",
    "ResolvedParameter",
]
