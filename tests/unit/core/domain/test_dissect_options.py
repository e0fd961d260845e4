from src.core.domain.dissect_options import DissectionOptions
from src.core.domain.name_resolution import (
    NameResolutionFlags,
    describe_resolution_flags,
    parse_resolution_flags,
)
from src.core.domain.timestamp import TimestampPrecision, TimestampType


def test_reset_restores_defaults_in_place() -> None:
    options = DissectionOptions(
        time_format=TimestampType.UTC,
        time_precision=TimestampPrecision.FIXED_MSEC,
        enable_protocol_names=["mdns"],
    )

    result = options.reset()

    assert result is options
    assert options == DissectionOptions()
    assert options.has_protocol_changes() is False


def test_summary_lines() -> None:
    options = DissectionOptions(
        time_format=TimestampType.EPOCH,
        disable_protocol_names=["tcp", "dns"],
    )

    assert options.summary_lines() == [
        "time_format: epoch",
        "time_precision: not_set",
        "disable_protocol_names: tcp, dns",
        "enable_protocol_names: -",
        "enable_heuristic_names: -",
        "disable_heuristic_names: -",
    ]
    assert options.has_protocol_changes() is True


def test_resolution_flags_are_parsed_on_top_of_base() -> None:
    base = NameResolutionFlags(vlan_name=True)

    flags, bad = parse_resolution_flags("mt", base)

    assert bad is None
    assert flags.enabled_names() == ["mac_name", "transport_name", "vlan_name"]
    assert base.enabled_names() == ["vlan_name"]


def test_resolution_flags_stop_at_first_unknown_letter() -> None:
    flags, bad = parse_resolution_flags("mzq", NameResolutionFlags())

    assert bad == "z"
    assert flags == NameResolutionFlags()


def test_resolution_flag_help_lists_every_letter() -> None:
    text = describe_resolution_flags()

    assert text.startswith("\t'd' ")
    assert "\t'v' " in text
