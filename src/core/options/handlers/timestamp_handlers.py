"""
Handlers for the time stamp options ``-t`` and ``-u``.
"""

from __future__ import annotations

import logging

from src.core.common.exceptions import InvalidOptionError
from src.core.domain.dissect_options import DissectionOptions
from src.core.domain.timestamp import (
    SECONDS_TYPE_TOKENS,
    TIMESTAMP_PRECISION_SUFFIXES,
    TIMESTAMP_TYPE_TOKENS,
    TimestampPrecision,
    TimestampType,
)
from src.core.options.handler import IOptionHandler
from src.core.options.option_codes import OptionCode
from src.core.options.registry import option_handler

logger = logging.getLogger(__name__)


def _describe_tokens(tokens: dict[str, tuple[object, str]], width: int) -> str:
    lines = []
    for token, (_, text) in tokens.items():
        quoted = f'"{token}"'
        lines.append(f"\t{quoted:<{width}} for {text}")
    return "\n".join(lines)


TIMESTAMP_TYPE_HELP = _describe_tokens(TIMESTAMP_TYPE_TOKENS, 6)
SECONDS_TYPE_HELP = _describe_tokens(SECONDS_TYPE_TOKENS, 5)


def parse_timestamp_argument(
    argument: str,
) -> tuple[TimestampType | None, TimestampPrecision | None]:
    """Split a ``-t`` argument into its type and precision parts.

    ``argument`` is ``<type>[.[N]]``. Either part may be missing from the
    result: the type is None for a precision-only argument such as ``.3``,
    the precision is None when there is no ``.`` at all.

    Raises:
        InvalidOptionError: If the precision suffix or the type is invalid.
            The message always quotes ``argument`` unchanged.
    """
    type_part, dot, suffix = argument.partition(".")

    precision: TimestampPrecision | None = None
    if dot:
        precision = TIMESTAMP_PRECISION_SUFFIXES.get(suffix)
        if precision is None:
            raise InvalidOptionError(
                f'Invalid .N time stamp precision "{argument}"; '
                "N must be 0, 1, 2, 3, 6, 9 or absent",
                option=OptionCode.TIMESTAMP_TYPE.value,
                value=argument,
            )

    if dot and not type_part:
        return None, precision

    entry = TIMESTAMP_TYPE_TOKENS.get(type_part)
    if entry is None:
        raise InvalidOptionError(
            f'Invalid time stamp type "{argument}"; it must be one of:',
            option=OptionCode.TIMESTAMP_TYPE.value,
            value=argument,
            continuation=TIMESTAMP_TYPE_HELP,
        )
    return entry[0], precision


@option_handler(OptionCode.TIMESTAMP_TYPE)
class TimestampTypeHandler(IOptionHandler):
    """
    Sets the time stamp format and/or precision.
    """

    @property
    def option_code(self) -> OptionCode:
        return OptionCode.TIMESTAMP_TYPE

    @property
    def description(self) -> str:
        return "output format of time stamps (def: r: rel. to first)"

    @property
    def format(self) -> str:
        return "-t (a|ad|adoy|d|dd|e|r|u|ud|udoy)[.[N]]"

    @property
    def examples(self) -> list[str]:
        return ["-t ad", "-t ud.6", "-t .3", "-t e."]

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        time_format, time_precision = parse_timestamp_argument(argument or "")
        if time_format is not None:
            options.time_format = time_format
        if time_precision is not None:
            options.time_precision = time_precision
        logger.debug(
            "Time stamp format=%s precision=%s",
            options.time_format.value,
            options.time_precision.value,
        )
        return True


@option_handler(OptionCode.SECONDS_TYPE)
class SecondsTypeHandler(IOptionHandler):
    """
    Chooses plain seconds or hours:minutes:seconds for time stamps.
    """

    @property
    def option_code(self) -> OptionCode:
        return OptionCode.SECONDS_TYPE

    @property
    def description(self) -> str:
        return "output format of seconds (def: s: seconds)"

    @property
    def format(self) -> str:
        return "-u s|hms"

    def handle(self, argument: str | None, options: DissectionOptions) -> bool:
        entry = SECONDS_TYPE_TOKENS.get(argument or "")
        if entry is None:
            raise InvalidOptionError(
                f'Invalid seconds type "{argument}"; it must be one of:',
                option=OptionCode.SECONDS_TYPE.value,
                value=argument,
                continuation=SECONDS_TYPE_HELP,
            )
        self._context.timestamp_display.set_seconds_type(entry[0])
        return True
