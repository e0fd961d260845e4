from src.core.domain.name_resolution import (
    RESOLUTION_FLAG_LETTERS,
    NameResolutionFlags,
    describe_resolution_flags,
    parse_resolution_flags,
)
from src.core.services.name_resolution_service import NameResolutionService


def test_flags_accumulate_on_top_of_current_state() -> None:
    service = NameResolutionService(NameResolutionFlags(vlan_name=True))

    assert service.set_resolution_flags("m") is None
    assert service.set_resolution_flags("t") is None

    assert service.flags.enabled_names() == ["mac_name", "transport_name", "vlan_name"]


def test_empty_flag_string_changes_nothing() -> None:
    service = NameResolutionService()

    assert service.set_resolution_flags("") is None
    assert service.flags == NameResolutionFlags()


def test_invalid_letter_returned_and_state_kept() -> None:
    service = NameResolutionService()

    assert service.set_resolution_flags("mnZ") == "Z"
    assert service.flags == NameResolutionFlags()


def test_disable_clears_everything() -> None:
    service = NameResolutionService(NameResolutionFlags(mac_name=True, network_name=True))

    service.disable_name_resolution()

    assert service.flags.enabled_names() == []


def test_parse_is_case_sensitive() -> None:
    flags, bad = parse_resolution_flags("N", NameResolutionFlags())
    assert bad is None
    assert flags.use_external_net_name_resolver is True
    assert flags.network_name is False


def test_description_has_one_entry_per_letter() -> None:
    text = describe_resolution_flags()
    for letter in RESOLUTION_FLAG_LETTERS:
        assert f"\t'{letter}' to enable" in text
