"""
Defines the interface for option handlers.
"""

from abc import ABC, abstractmethod

from src.core.domain.dissect_options import DissectionOptions
from src.core.options.context import OptionContext
from src.core.options.option_codes import OptionCode


class IOptionHandler(ABC):
    """
    Interface for an option handler.
    """

    def __init__(self, context: OptionContext | None = None) -> None:
        # Help text can be read without a context; handle() needs one.
        self._context = context  # type: ignore[assignment]

    @property
    @abstractmethod
    def option_code(self) -> OptionCode:
        """The option code served by this handler."""

    @property
    @abstractmethod
    def description(self) -> str:
        """A short description of the option."""

    @property
    @abstractmethod
    def format(self) -> str:
        """The format of the option."""

    @property
    def examples(self) -> list[str]:
        """A list of examples of how to use the option."""
        return []

    @abstractmethod
    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        """
        Handles one occurrence of the option.

        Args:
            argument: The option argument, or None for options without one.
            options: The configuration record to update.

        Returns:
            True on success. Validation failures are raised as
            InvalidOptionError or UnsupportedFeatureError; a False return
            means a collaborator already reported the failure.
        """
