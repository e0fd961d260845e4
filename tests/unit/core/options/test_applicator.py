import logging
from unittest.mock import MagicMock, call

import pytest
from src.core.common.exceptions import UnknownHeuristicNameError
from src.core.domain.dissect_options import DissectionOptions
from src.core.interfaces.protocol_registry_interface import IProtocolRegistry
from src.core.options.applicator import (
    ProtocolConfigurationApplicator,
    apply_protocol_configuration,
)
from src.core.services.protocol_registry import InMemoryProtocolRegistry


@pytest.fixture
def registry() -> InMemoryProtocolRegistry:
    registry = InMemoryProtocolRegistry()
    for name in ("frame", "tcp", "http", "dns", "rtp"):
        registry.register_protocol(name)
    registry.register_protocol("mdns", enabled_by_default=False)
    registry.register_heuristic("http", "http", enabled=False)
    registry.register_heuristic("rtp_udp", "rtp", enabled=True)
    return registry


def test_empty_options_succeed(registry, sink) -> None:
    assert apply_protocol_configuration(DissectionOptions(), registry, sink) is True
    assert sink.errors == []


def test_protocols_are_disabled_and_enabled(registry, sink) -> None:
    options = DissectionOptions(
        disable_protocol_names=["tcp", "dns"], enable_protocol_names=["mdns"]
    )

    assert apply_protocol_configuration(options, registry, sink) is True

    assert registry.is_protocol_enabled("tcp") is False
    assert registry.is_protocol_enabled("dns") is False
    assert registry.is_protocol_enabled("mdns") is True
    assert registry.is_protocol_enabled("http") is True


def test_unknown_protocol_names_never_fail(registry, sink) -> None:
    options = DissectionOptions(
        disable_protocol_names=["nonexistent"], enable_protocol_names=["alsobogus"]
    )

    assert apply_protocol_configuration(options, registry, sink) is True
    assert sink.errors == []


def test_bad_heuristic_name_does_not_stop_the_batch(registry, sink) -> None:
    options = DissectionOptions(enable_heuristic_names=["http", "bogus"])

    assert apply_protocol_configuration(options, registry, sink) is False

    assert registry.is_heuristic_enabled("http") is True
    assert sink.errors == ["No such protocol bogus, can't enable"]


def test_unknown_name_before_known_one_still_applies_the_rest(registry, sink) -> None:
    options = DissectionOptions(
        enable_heuristic_names=["bogus", "http"],
        disable_heuristic_names=["rtp_udp", "nope"],
    )

    assert apply_protocol_configuration(options, registry, sink) is False

    assert registry.is_heuristic_enabled("http") is True
    assert registry.is_heuristic_enabled("rtp_udp") is False
    assert sink.errors == [
        "No such protocol bogus, can't enable",
        "No such protocol nope, can't disable",
    ]


def test_result_lists_every_unresolved_name(registry, sink) -> None:
    options = DissectionOptions(
        enable_heuristic_names=["x"], disable_heuristic_names=["y", "rtp_udp"]
    )

    result = ProtocolConfigurationApplicator(registry, sink).apply(options)

    assert result.success is False
    assert result.unresolved_names == ["x", "y"]
    assert all(isinstance(f, UnknownHeuristicNameError) for f in result.failures)
    assert [f.enable for f in result.failures] == [True, False]


def test_registry_calls_follow_list_order(sink) -> None:
    registry = MagicMock(spec=IProtocolRegistry)
    registry.enable_heuristic_by_name.return_value = True
    options = DissectionOptions(
        disable_protocol_names=["a", "b"],
        enable_protocol_names=["c"],
        enable_heuristic_names=["h1", "h1"],
        disable_heuristic_names=["h2"],
    )

    assert apply_protocol_configuration(options, registry, sink) is True

    assert registry.mock_calls == [
        call.disable_protocol_by_name("a"),
        call.disable_protocol_by_name("b"),
        call.enable_protocol_by_name("c"),
        call.enable_heuristic_by_name("h1", True),
        call.enable_heuristic_by_name("h1", True),
        call.enable_heuristic_by_name("h2", False),
    ]


def test_application_does_not_modify_options(registry, sink) -> None:
    options = DissectionOptions(
        disable_protocol_names=["tcp"], enable_heuristic_names=["bogus"]
    )
    before = options.model_dump()

    apply_protocol_configuration(options, registry, sink)

    assert options.model_dump() == before


def test_unresolved_heuristic_is_logged(registry, sink, caplog) -> None:
    options = DissectionOptions(enable_heuristic_names=["bogus"])

    with caplog.at_level(logging.WARNING):
        apply_protocol_configuration(options, registry, sink)

    assert "heuristic_not_found" in caplog.text
    assert "bogus" in caplog.text
