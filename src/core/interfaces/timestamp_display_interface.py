from __future__ import annotations

from abc import ABC, abstractmethod

from src.core.domain.timestamp import TimestampSecondsType


class ITimestampDisplay(ABC):
    @abstractmethod
    def set_seconds_type(self, seconds_type: TimestampSecondsType) -> None:
        pass
