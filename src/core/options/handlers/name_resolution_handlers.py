"""
Handlers for the name resolution options ``-n`` and ``-N``.
"""

from src.core.common.exceptions import InvalidOptionError
from src.core.domain.dissect_options import DissectionOptions
from src.core.domain.name_resolution import describe_resolution_flags
from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode
from src.core.options.registry import option_handler


@option_handler(OptionCode.NO_NAME_RESOLUTION)
class NoNameResolutionHandler(IOptionHandler):
    @property
    def option_code(self) -> OptionCode:
        return OptionCode.NO_NAME_RESOLUTION

    @property
    def description(self) -> str:
        return "disable all name resolutions (def: \"mNd\" enabled, or as set in preferences)"

    @property
    def format(self) -> str:
        return "-n"

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        self._context.name_resolver.disable_name_resolution()
        return True


@option_handler(OptionCode.NAME_RESOLUTION_FLAGS)
class NameResolutionFlagsHandler(IOptionHandler):
    """
    Enables the kinds of name resolution named by each flag letter.
    """

    @property
    def option_code(self) -> OptionCode:
        return OptionCode.NAME_RESOLUTION_FLAGS

    @property
    def description(self) -> str:
        return "enable specific name resolution(s): \"mnNtdv\""

    @property
    def format(self) -> str:
        return "-N <name resolve flags>"

    @property
    def examples(self) -> list[str]:
        return ["-N mt", "-N dmn"]

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        bad_letter = self._context.name_resolver.set_resolution_flags(argument or "")
        if bad_letter is not None:
            raise InvalidOptionError(
                f"-N specifies unknown resolving option '{bad_letter}'; valid options are:",
                option=OptionCode.NAME_RESOLUTION_FLAGS.value,
                value=argument,
                continuation=describe_resolution_flags(),
            )
        return True
