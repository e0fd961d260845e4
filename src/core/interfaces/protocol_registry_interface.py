from __future__ import annotations

from abc import ABC, abstractmethod


class IProtocolRegistry(ABC):
    """Enable/disable protocols and heuristic sub-dissectors by name.

    The plain protocol operations have no failure channel: unknown names are
    the registry's own business. The heuristic operation reports whether the
    name was found so callers can collect unresolved names.
    """

    @abstractmethod
    def disable_protocol_by_name(self, name: str) -> None:
        pass

    @abstractmethod
    def enable_protocol_by_name(self, name: str) -> None:
        pass

    @abstractmethod
    def enable_heuristic_by_name(self, name: str, enable: bool) -> bool:
        """Enable or disable a heuristic sub-dissector.

        Returns:
            False when no heuristic sub-dissector has that short name.
        """
