"""
Option codes understood by the dissection option handlers.

The caller's flag-dispatch table is built from these constants so both sides
agree on the closed set of codes.
"""

from enum import Enum


class OptionCode(str, Enum):
    DECODE_AS = "d"
    KEYTAB = "K"
    NO_NAME_RESOLUTION = "n"
    NAME_RESOLUTION_FLAGS = "N"
    TIMESTAMP_TYPE = "t"
    SECONDS_TYPE = "u"
    DISABLE_PROTOCOL = "disable-protocol"
    ENABLE_HEURISTIC = "enable-heuristic"
    DISABLE_HEURISTIC = "disable-heuristic"
    ENABLE_PROTOCOL = "enable-protocol"

    @property
    def is_long_option(self) -> bool:
        return len(self.value) > 1

    @property
    def flag(self) -> str:
        """The option as typed on a command line, e.g. ``-t`` or ``--enable-protocol``."""
        return f"--{self.value}" if self.is_long_option else f"-{self.value}"


# getopt-style short option string; a trailing ':' marks an option argument.
OPTSTRING_DISSECT_COMMON = "d:K:nN:t:u:"

# Long option name -> whether it takes an argument.
LONGOPT_DISSECT_COMMON: dict[str, bool] = {
    OptionCode.DISABLE_PROTOCOL.value: True,
    OptionCode.ENABLE_HEURISTIC.value: True,
    OptionCode.DISABLE_HEURISTIC.value: True,
    OptionCode.ENABLE_PROTOCOL.value: True,
}


def takes_argument(code: OptionCode) -> bool:
    if code.is_long_option:
        return LONGOPT_DISSECT_COMMON[code.value]
    index = OPTSTRING_DISSECT_COMMON.index(code.value)
    return OPTSTRING_DISSECT_COMMON[index + 1 : index + 2] == ":"
