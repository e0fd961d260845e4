"""
Handlers for the long options that collect protocol and heuristic names.

Names are only recorded here; they are checked against the protocol registry
when the configuration is applied.
"""

from src.core.domain.dissect_options import DissectionOptions
from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode
from src.core.options.registry import option_handler


class ProtocolListHandler(IOptionHandler):
    """Appends the argument verbatim to one of the option name lists."""

    field_name: str
    code: OptionCode
    help_text: str

    @property
    def option_code(self) -> OptionCode:
        return self.code

    @property
    def description(self) -> str:
        return self.help_text

    @property
    def format(self) -> str:
        return f"{self.code.flag} <proto_name>"

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        getattr(options, self.field_name).append(argument or "")
        return True


@option_handler(OptionCode.DISABLE_PROTOCOL)
class DisableProtocolHandler(ProtocolListHandler):
    field_name = "disable_protocol_names"
    code = OptionCode.DISABLE_PROTOCOL
    help_text = "disable dissection of proto_name"


@option_handler(OptionCode.ENABLE_PROTOCOL)
class EnableProtocolHandler(ProtocolListHandler):
    field_name = "enable_protocol_names"
    code = OptionCode.ENABLE_PROTOCOL
    help_text = "enable dissection of proto_name"


@option_handler(OptionCode.ENABLE_HEURISTIC)
class EnableHeuristicHandler(ProtocolListHandler):
    field_name = "enable_heuristic_names"
    code = OptionCode.ENABLE_HEURISTIC
    help_text = "enable dissection of heuristic protocol"

    @property
    def format(self) -> str:
        return f"{self.code.flag} <short_name>"


@option_handler(OptionCode.DISABLE_HEURISTIC)
class DisableHeuristicHandler(ProtocolListHandler):
    field_name = "disable_heuristic_names"
    code = OptionCode.DISABLE_HEURISTIC
    help_text = "disable dissection of heuristic protocol"

    @property
    def format(self) -> str:
        return f"{self.code.flag} <short_name>"
