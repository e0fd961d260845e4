"""
Common exception classes for dissection option handling.

This module defines custom exception classes used throughout the application
for better error handling and categorization.
"""

from __future__ import annotations


class DissectOptionsError(Exception):
    """Base exception class for all dissection option errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    @property
    def continuation(self) -> str | None:
        """Multi-line detail attached to the message, if any."""
        return self.details.get("continuation")

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args", "continuation"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class InvalidOptionError(DissectOptionsError):
    """Raised when an option argument is malformed or out of vocabulary."""

    def __init__(
        self,
        message: str = "Invalid option",
        option: str | None = None,
        value: str | None = None,
        continuation: str | None = None,
        **kwargs,
    ):
        details = kwargs.pop("details", None) or {}
        if continuation is not None:
            details["continuation"] = continuation
        super().__init__(message, details, **kwargs)
        self.option = option
        self.value = value


class UnsupportedFeatureError(DissectOptionsError):
    """Raised when an option needs a capability that is not available."""

    def __init__(
        self,
        message: str = "Feature not supported",
        feature: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.feature = feature


class UnknownHeuristicNameError(DissectOptionsError):
    """Raised when the registry cannot resolve a heuristic dissector name."""

    def __init__(self, name: str, enable: bool, **kwargs):
        action = "enable" if enable else "disable"
        super().__init__(f"No such protocol {name}, can't {action}", **kwargs)
        self.name = name
        self.enable = enable


class ContractViolationError(DissectOptionsError):
    """Raised when a caller hands the unit an option code it does not handle.

    This is a programming error in the caller and is never converted into a
    ``False`` return value.
    """

    def __init__(
        self,
        message: str = "Unhandled option code",
        option: object | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.option = option


class ConfigurationError(DissectOptionsError):
    """Raised when there's an application configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
