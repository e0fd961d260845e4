from __future__ import annotations

import logging

from src.core.domain.timestamp import TimestampSecondsType
from src.core.interfaces.timestamp_display_interface import ITimestampDisplay

logger = logging.getLogger(__name__)


class TimestampDisplayService(ITimestampDisplay):
    def __init__(
        self, seconds_type: TimestampSecondsType = TimestampSecondsType.DEFAULT
    ) -> None:
        self.seconds_type = seconds_type

    def set_seconds_type(self, seconds_type: TimestampSecondsType) -> None:
        logger.debug("Seconds display type set to %s", seconds_type.value)
        self.seconds_type = seconds_type
