"""
Processes one dissection option at a time.

The processor looks up the handler registered for an option code, lets it
update the configuration record and turns validation errors into diagnostics
on the context's sink plus a ``False`` result.
"""

from __future__ import annotations

import logging

from src.core.common.exceptions import (
    ContractViolationError,
    InvalidOptionError,
    UnsupportedFeatureError,
)
from src.core.config.parameter_resolution import ParameterResolution, ParameterSource
from src.core.domain.dissect_options import DissectionOptions
from src.core.options.context import OptionContext
from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode
from src.core.options.registry import get_option_handler, import_option_handlers

logger = logging.getLogger(__name__)


def initialize_configuration(
    options: DissectionOptions | None = None,
) -> DissectionOptions:
    """Return a configuration record holding only defaults.

    Passing an existing record resets it in place, discarding everything
    accumulated so far.
    """
    if options is None:
        return DissectionOptions()
    return options.reset()


def _coerce_option_code(code: OptionCode | str) -> OptionCode:
    if isinstance(code, OptionCode):
        return code
    try:
        return OptionCode(code)
    except ValueError:
        raise ContractViolationError(
            f"Option code {code!r} is not handled by the dissection options",
            option=code,
        ) from None


class OptionProcessor:
    """Dispatches ``(code, argument)`` pairs to the registered handlers."""

    def __init__(
        self,
        context: OptionContext,
        resolution: ParameterResolution | None = None,
    ) -> None:
        self._context = context
        self._resolution = resolution
        self._handlers: dict[OptionCode, IOptionHandler] = {}
        import_option_handlers()

    def get_handler(self, code: OptionCode | str) -> IOptionHandler:
        option_code = _coerce_option_code(code)
        handler = self._handlers.get(option_code)
        if handler is None:
            handler_cls = get_option_handler(option_code)
            if handler_cls is None:
                raise ContractViolationError(
                    f"No handler registered for option {option_code.flag}",
                    option=option_code,
                )
            handler = handler_cls(self._context)
            self._handlers[option_code] = handler
        return handler

    def handle_option(
        self,
        options: DissectionOptions,
        code: OptionCode | str,
        argument: str | None,
    ) -> bool:
        """Process one option occurrence.

        Returns:
            False if the argument was rejected; the diagnostic has already
            been written to the sink.

        Raises:
            ContractViolationError: If ``code`` is not a dissection option.
        """
        handler = self.get_handler(code)
        try:
            ok = handler.handle(argument, options)
        except (InvalidOptionError, UnsupportedFeatureError) as exc:
            logger.debug("Rejected %s: %s", handler.option_code.flag, exc.to_dict())
            self._context.sink.error(exc.message)
            if exc.continuation:
                self._context.sink.error_continuation(exc.continuation)
            return False

        if ok and self._resolution is not None:
            self._resolution.record(
                handler.option_code.value,
                argument,
                ParameterSource.CLI,
                origin=handler.option_code.flag,
            )
        return ok


def handle_option(
    options: DissectionOptions,
    code: OptionCode | str,
    argument: str | None,
    context: OptionContext,
) -> bool:
    """Process one option with a throwaway :class:`OptionProcessor`."""
    return OptionProcessor(context).handle_option(options, code, argument)
