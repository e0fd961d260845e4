"""Parsing of ``-d <layer_type>==<selector>,<decode_as_protocol>`` rules."""

from __future__ import annotations

import logging
import re

from src.core.common.exceptions import InvalidOptionError
from src.core.interfaces.decode_as_interface import IDecodeAsParser
from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.services.protocol_registry import (
    DecodeAsRule,
    DissectorTableKind,
    InMemoryProtocolRegistry,
)

logger = logging.getLogger(__name__)

DECODE_AS_SYNTAX = "<layer_type>==<selector>,<decode_as_protocol>"
DECODE_AS_EXAMPLE = "tcp.port==8888,http"

# Integer dissector tables are keyed by unsigned 32-bit values.
MAX_SELECTOR_VALUE = 0xFFFFFFFF

_SELECTOR_NUMBER = re.compile(r"0[xX][0-9a-fA-F]+|[0-9]+")


def _parse_integer(text: str, rule: str) -> int:
    if not _SELECTOR_NUMBER.fullmatch(text):
        raise InvalidOptionError(
            f'Invalid selector number "{text}" in decode-as rule "{rule}"',
            option="d",
            value=rule,
        )
    value = int(text, 0)
    if value > MAX_SELECTOR_VALUE:
        raise InvalidOptionError(
            f'Selector number "{text}" in decode-as rule "{rule}" is too large',
            option="d",
            value=rule,
        )
    return value


def parse_integer_selectors(selector: str, rule: str) -> tuple[int, int]:
    """Parse ``N``, ``N-M`` or ``N:COUNT`` into inclusive ``(low, high)`` bounds."""
    if "-" in selector:
        low_text, high_text = selector.split("-", 1)
        low = _parse_integer(low_text, rule)
        high = _parse_integer(high_text, rule)
    elif ":" in selector:
        low_text, count_text = selector.split(":", 1)
        low = _parse_integer(low_text, rule)
        count = _parse_integer(count_text, rule)
        if count == 0:
            raise InvalidOptionError(
                f'Selector range "{selector}" in decode-as rule "{rule}" is empty',
                option="d",
                value=rule,
            )
        high = low + count - 1
        if high > MAX_SELECTOR_VALUE:
            raise InvalidOptionError(
                f'Selector range "{selector}" in decode-as rule "{rule}" is too large',
                option="d",
                value=rule,
            )
    else:
        value = _parse_integer(selector, rule)
        return value, value

    if high < low:
        raise InvalidOptionError(
            f'Selector range "{selector}" in decode-as rule "{rule}" ends before it starts',
            option="d",
            value=rule,
        )
    return low, high


class DecodeAsRuleParser(IDecodeAsParser):
    """Validate decode-as rules against a registry and install them."""

    def __init__(
        self, registry: InMemoryProtocolRegistry, sink: IDiagnosticSink
    ) -> None:
        self._registry = registry
        self._sink = sink

    def parse(self, rule: str) -> bool:
        try:
            parsed = self.parse_rule(rule)
        except InvalidOptionError as exc:
            self._sink.error(exc.message)
            if exc.continuation:
                self._sink.error_continuation(exc.continuation)
            return False
        self._registry.add_decode_as_rule(parsed)
        return True

    def parse_rule(self, rule: str) -> DecodeAsRule:
        """Parse ``rule`` into a :class:`DecodeAsRule` without installing it.

        Raises:
            InvalidOptionError: If the rule is malformed or names an unknown
                layer type or protocol.
        """
        table_name, sep, remainder = rule.partition("==")
        table_name = table_name.strip()
        if not sep or not table_name:
            raise InvalidOptionError(
                f'Invalid decode-as rule "{rule}"; it must be of the form:',
                option="d",
                value=rule,
                continuation=f"\t{DECODE_AS_SYNTAX}\n\te.g. {DECODE_AS_EXAMPLE}",
            )

        kind = self._registry.get_dissector_table_kind(table_name)
        if kind is None:
            valid = "\n".join(
                f"\t{name}" for name in self._registry.get_dissector_table_names()
            )
            raise InvalidOptionError(
                f'"{table_name}" isn\'t a valid layer type; valid layer types are:',
                option="d",
                value=rule,
                continuation=valid,
            )

        selector, sep, protocol = remainder.partition(",")
        selector = selector.strip()
        protocol = protocol.strip()
        if not sep or not selector or not protocol:
            raise InvalidOptionError(
                f'Decode-as rule "{rule}" must give a selector and a protocol, e.g. {DECODE_AS_EXAMPLE}',
                option="d",
                value=rule,
            )

        if kind is DissectorTableKind.INTEGER:
            bounds: tuple[int, int] | str = parse_integer_selectors(selector, rule)
        else:
            bounds = selector

        if not self._registry.has_protocol(protocol):
            raise InvalidOptionError(
                f'"{protocol}" isn\'t a valid protocol name in decode-as rule "{rule}"',
                option="d",
                value=rule,
            )

        logger.debug("Parsed decode-as rule %r", rule)
        return DecodeAsRule(table=table_name, selector=bounds, protocol=protocol)
