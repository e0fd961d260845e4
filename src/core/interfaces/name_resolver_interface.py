from __future__ import annotations

from abc import ABC, abstractmethod


class INameResolver(ABC):
    @abstractmethod
    def disable_name_resolution(self) -> None:
        pass

    @abstractmethod
    def set_resolution_flags(self, flag_string: str) -> str | None:
        """Enable the resolution kinds named by each letter of ``flag_string``.

        Returns:
            The first unknown letter, or None when every letter was valid.
            Nothing is changed when a letter is unknown.
        """
