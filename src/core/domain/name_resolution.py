"""Name resolution flags selected with ``-n`` / ``-N``."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from src.core.interfaces.model_bases import InternalDTO


@dataclass(frozen=True)
class NameResolutionFlags(InternalDTO):
    """Which kinds of addresses and numbers are resolved to names."""

    dns_pkt_addr_resolution: bool = False
    mac_name: bool = False
    network_name: bool = False
    use_external_net_name_resolver: bool = False
    transport_name: bool = False
    vlan_name: bool = False

    @classmethod
    def disabled(cls) -> NameResolutionFlags:
        return cls()

    def enabled_names(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]

    def with_flag(self, name: str) -> NameResolutionFlags:
        return replace(self, **{name: True})


# Letter -> (flag attribute, help text); insertion order is the help order.
RESOLUTION_FLAG_LETTERS: dict[str, tuple[str, str]] = {
    "d": (
        "dns_pkt_addr_resolution",
        "to enable address resolution from captured DNS packets",
    ),
    "m": ("mac_name", "to enable MAC address resolution"),
    "n": ("network_name", "to enable network address resolution"),
    "N": (
        "use_external_net_name_resolver",
        "to enable using external resolvers (e.g., DNS)\n"
        "\t    for network address resolution",
    ),
    "t": ("transport_name", "to enable transport-layer port number resolution"),
    "v": ("vlan_name", "to enable VLAN IDs to names resolution"),
}


def parse_resolution_flags(
    flag_string: str, base: NameResolutionFlags
) -> tuple[NameResolutionFlags, str | None]:
    """Apply every letter in ``flag_string`` on top of ``base``.

    Returns the new flags and ``None``, or ``base`` unchanged together with
    the first letter that is not a known flag.
    """
    flags = base
    for letter in flag_string:
        entry = RESOLUTION_FLAG_LETTERS.get(letter)
        if entry is None:
            return base, letter
        flags = flags.with_flag(entry[0])
    return flags, None


def describe_resolution_flags() -> str:
    return "\n".join(
        f"\t'{letter}' {text}" for letter, (_, text) in RESOLUTION_FLAG_LETTERS.items()
    )
