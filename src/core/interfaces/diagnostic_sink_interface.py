from __future__ import annotations

from abc import ABC, abstractmethod


class IDiagnosticSink(ABC):
    """Receives command-line error messages meant for the user."""

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def error_continuation(self, message: str) -> None:
        """Attach multi-line detail to the most recent error."""
