"""An in-process protocol registry.

Holds protocols, heuristic sub-dissectors and dissector tables so the
dissection options can be applied and decode-as rules checked without the
full dissection engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from src.core.interfaces.protocol_registry_interface import IProtocolRegistry

logger = logging.getLogger(__name__)


class DissectorTableKind(str, Enum):
    """Type of selector a dissector table is keyed by."""

    INTEGER = "integer"
    STRING = "string"


@dataclass
class ProtocolEntry:
    name: str
    enabled: bool = True
    enabled_by_default: bool = True
    # Some protocols (e.g. "frame") are needed by everything else.
    can_toggle: bool = True


@dataclass
class HeuristicEntry:
    short_name: str
    protocol: str
    enabled: bool = True


@dataclass(frozen=True)
class DecodeAsRule:
    """Forces ``protocol`` for a selector of ``table``.

    ``selector`` is an inclusive ``(low, high)`` range for integer tables and
    the literal key for string tables.
    """

    table: str
    selector: tuple[int, int] | str
    protocol: str

    def matches(self, selector: int | str) -> bool:
        if isinstance(self.selector, str):
            return selector == self.selector
        if not isinstance(selector, int):
            return False
        low, high = self.selector
        return low <= selector <= high


@dataclass
class DissectorTable:
    name: str
    kind: DissectorTableKind
    # Later rules take precedence over earlier ones.
    rules: list[DecodeAsRule] = field(default_factory=list)


class InMemoryProtocolRegistry(IProtocolRegistry):
    """A registry for protocols, heuristic sub-dissectors and dissector tables."""

    def __init__(self) -> None:
        self._protocols: dict[str, ProtocolEntry] = {}
        self._heuristics: dict[str, HeuristicEntry] = {}
        self._tables: dict[str, DissectorTable] = {}
        self._decode_as_rules: list[DecodeAsRule] = []

    # Registration

    def register_protocol(
        self, name: str, *, enabled_by_default: bool = True, can_toggle: bool = True
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Protocol name must be a non-empty string.")
        if name in self._protocols:
            logger.warning("Protocol '%s' is already registered. Skipping.", name)
            return
        self._protocols[name] = ProtocolEntry(
            name=name,
            enabled=enabled_by_default,
            enabled_by_default=enabled_by_default,
            can_toggle=can_toggle,
        )

    def register_heuristic(
        self, short_name: str, protocol: str, *, enabled: bool = True
    ) -> None:
        if protocol not in self._protocols:
            raise ValueError(
                f"Heuristic '{short_name}' refers to unknown protocol '{protocol}'."
            )
        if short_name in self._heuristics:
            logger.warning("Heuristic '%s' is already registered. Skipping.", short_name)
            return
        self._heuristics[short_name] = HeuristicEntry(
            short_name=short_name, protocol=protocol, enabled=enabled
        )

    def register_dissector_table(self, name: str, kind: DissectorTableKind) -> None:
        if name in self._tables:
            logger.warning("Dissector table '%s' is already registered. Skipping.", name)
            return
        self._tables[name] = DissectorTable(name=name, kind=kind)

    # IProtocolRegistry

    def disable_protocol_by_name(self, name: str) -> None:
        self._set_protocol_enabled(name, False)

    def enable_protocol_by_name(self, name: str) -> None:
        self._set_protocol_enabled(name, True)

    def enable_heuristic_by_name(self, name: str, enable: bool) -> bool:
        entry = self._heuristics.get(name)
        if entry is None:
            return False
        entry.enabled = enable
        logger.debug("Heuristic '%s' %s", name, "enabled" if enable else "disabled")
        return True

    def _set_protocol_enabled(self, name: str, enabled: bool) -> None:
        entry = self._protocols.get(name)
        if entry is None:
            logger.warning("Unknown protocol '%s' ignored", name)
            return
        if not entry.can_toggle:
            logger.warning("Protocol '%s' cannot be enabled or disabled", name)
            return
        entry.enabled = enabled
        logger.debug("Protocol '%s' %s", name, "enabled" if enabled else "disabled")

    # Queries

    def has_protocol(self, name: str) -> bool:
        return name in self._protocols

    def is_protocol_enabled(self, name: str) -> bool:
        entry = self._protocols.get(name)
        if entry is None:
            raise KeyError(f"Protocol '{name}' is not registered.")
        return entry.enabled

    def is_heuristic_enabled(self, short_name: str) -> bool:
        entry = self._heuristics.get(short_name)
        if entry is None:
            raise KeyError(f"Heuristic '{short_name}' is not registered.")
        return entry.enabled

    def get_protocol_names(self) -> list[str]:
        return sorted(self._protocols)

    def get_heuristic_names(self) -> list[str]:
        return sorted(self._heuristics)

    def get_dissector_table_kind(self, name: str) -> DissectorTableKind | None:
        table = self._tables.get(name)
        return table.kind if table else None

    def get_dissector_table_names(self) -> list[str]:
        return sorted(self._tables)

    # Decode-as

    def add_decode_as_rule(self, rule: DecodeAsRule) -> None:
        table = self._tables.get(rule.table)
        if table is None:
            raise KeyError(f"Dissector table '{rule.table}' is not registered.")
        if rule.protocol not in self._protocols:
            raise KeyError(f"Protocol '{rule.protocol}' is not registered.")
        table.rules.append(rule)
        self._decode_as_rules.append(rule)
        logger.debug("Decode-as: %s %s -> %s", rule.table, rule.selector, rule.protocol)

    @property
    def decode_as_rules(self) -> list[DecodeAsRule]:
        return list(self._decode_as_rules)

    def lookup_override(self, table: str, selector: int | str) -> str | None:
        dissector_table = self._tables.get(table)
        if dissector_table is None:
            return None
        for rule in reversed(dissector_table.rules):
            if rule.matches(selector):
                return rule.protocol
        return None

    @classmethod
    def with_builtin_protocols(cls) -> InMemoryProtocolRegistry:
        """Build a registry with a small catalogue of common protocols."""
        registry = cls()
        registry.register_protocol("frame", can_toggle=False)
        for name in (
            "eth", "vlan", "arp", "ip", "ipv6", "icmp", "tcp", "udp", "sctp",
            "dns", "http", "tls", "ssh", "kerberos", "smb", "stun", "rtp", "rtcp",
        ):
            registry.register_protocol(name)
        registry.register_protocol("mdns", enabled_by_default=False)

        for short_name, protocol, enabled in (
            ("http_tcp", "http", True),
            ("http_sctp", "http", True),
            ("tls_tcp", "tls", True),
            ("stun_udp", "stun", True),
            ("stun_tcp", "stun", True),
            ("rtp_udp", "rtp", False),
            ("rtcp_udp", "rtcp", False),
        ):
            registry.register_heuristic(short_name, protocol, enabled=enabled)

        registry.register_dissector_table("tcp.port", DissectorTableKind.INTEGER)
        registry.register_dissector_table("udp.port", DissectorTableKind.INTEGER)
        registry.register_dissector_table("sctp.port", DissectorTableKind.INTEGER)
        registry.register_dissector_table("ip.proto", DissectorTableKind.INTEGER)
        registry.register_dissector_table("ethertype", DissectorTableKind.INTEGER)
        registry.register_dissector_table("media_type", DissectorTableKind.STRING)
        return registry
