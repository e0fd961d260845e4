"""
Handlers for ``-d`` decode-as rules and ``-K`` keytab files.
"""

from src.core.common.exceptions import UnsupportedFeatureError
from src.core.domain.dissect_options import DissectionOptions
from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode
from src.core.options.registry import option_handler


@option_handler(OptionCode.DECODE_AS)
class DecodeAsHandler(IOptionHandler):
    @property
    def option_code(self) -> OptionCode:
        return OptionCode.DECODE_AS

    @property
    def description(self) -> str:
        return "\"Decode As\", see the man page for details"

    @property
    def format(self) -> str:
        return "-d <layer_type>==<selector>,<decode_as_protocol>"

    @property
    def examples(self) -> list[str]:
        return ["-d tcp.port==8888,http", "-d udp.port==5000-5010,rtp"]

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        return self._context.decode_as.parse(argument or "")


@option_handler(OptionCode.KEYTAB)
class KeytabHandler(IOptionHandler):
    @property
    def option_code(self) -> OptionCode:
        return OptionCode.KEYTAB

    @property
    def description(self) -> str:
        return "keytab file to use for kerberos decryption"

    @property
    def format(self) -> str:
        return "-K <keytab>"

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        loader = self._context.keytab_loader
        if loader is None:
            raise UnsupportedFeatureError(
                "-K specified, but Kerberos keytab file support isn't present",
                feature="kerberos",
            )
        loader.load(argument or "")
        return True
