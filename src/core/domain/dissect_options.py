from __future__ import annotations

import logging

from pydantic import ConfigDict, Field

from src.core.domain.timestamp import TimestampPrecision, TimestampType
from src.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


class DissectionOptions(DomainModel):
    """Dissection settings accumulated while command-line options are parsed.

    The time stamp fields follow last-write-wins. The four name lists keep
    command-line order and duplicates; names are only checked against the
    protocol registry when the configuration is applied.
    """

    model_config = ConfigDict(validate_assignment=True)

    time_format: TimestampType = TimestampType.NOT_SET
    time_precision: TimestampPrecision = TimestampPrecision.NOT_SET
    disable_protocol_names: list[str] = Field(default_factory=list)
    enable_protocol_names: list[str] = Field(default_factory=list)
    enable_heuristic_names: list[str] = Field(default_factory=list)
    disable_heuristic_names: list[str] = Field(default_factory=list)

    def reset(self) -> DissectionOptions:
        """Restore every field to its default value in place."""
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.get_default(call_default_factory=True))
        logger.debug("Dissection options reset to defaults")
        return self

    def has_protocol_changes(self) -> bool:
        return bool(
            self.disable_protocol_names
            or self.enable_protocol_names
            or self.enable_heuristic_names
            or self.disable_heuristic_names
        )

    def summary_lines(self) -> list[str]:
        """Render the options as ``key: value`` lines for display."""
        lines = [
            f"time_format: {self.time_format.value}",
            f"time_precision: {self.time_precision.value}",
        ]
        for name in (
            "disable_protocol_names",
            "enable_protocol_names",
            "enable_heuristic_names",
            "disable_heuristic_names",
        ):
            values = getattr(self, name)
            lines.append(f"{name}: {', '.join(values) if values else '-'}")
        return lines
