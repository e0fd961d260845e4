from __future__ import annotations

from abc import ABC, abstractmethod


class IKeytabLoader(ABC):
    @abstractmethod
    def load(self, path: str) -> None:
        pass
