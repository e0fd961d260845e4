from __future__ import annotations

from abc import ABC, abstractmethod


class IDecodeAsParser(ABC):
    @abstractmethod
    def parse(self, rule: str) -> bool:
        """Parse and install one decode-as rule.

        Diagnostics are reported by the parser itself; the return value only
        says whether the rule was accepted.
        """
