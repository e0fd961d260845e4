"""
A decorator-based option handler registry.
"""

import importlib
import pkgutil
from collections.abc import Callable

from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode

_registry: dict[OptionCode, type[IOptionHandler]] = {}

HANDLERS_PACKAGE = "src.core.options.handlers"


def option_handler(
    code: OptionCode,
) -> Callable[[type[IOptionHandler]], type[IOptionHandler]]:
    """
    A decorator to register an option handler.

    Args:
        code: The option code the handler serves.

    Returns:
        A decorator that registers the handler class.
    """

    def decorator(cls: type[IOptionHandler]) -> type[IOptionHandler]:
        if code in _registry and _registry[code] is not cls:
            raise ValueError(f"Option '{code.flag}' is already registered.")
        _registry[code] = cls
        return cls

    return decorator


def get_option_handler(code: OptionCode) -> type[IOptionHandler] | None:
    return _registry.get(code)


def get_all_option_handlers() -> dict[OptionCode, type[IOptionHandler]]:
    return _registry.copy()


def import_option_handlers() -> None:
    """Import every handler module so its decorator registration runs."""
    package = importlib.import_module(HANDLERS_PACKAGE)
    for m in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{HANDLERS_PACKAGE}.{m.name}")
