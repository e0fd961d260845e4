import logging

import pytest
from src.core.domain.dissect_options import DissectionOptions
from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.options.context import OptionContext
from src.core.options.processor import OptionProcessor, initialize_configuration
from src.core.services.decode_as_service import DecodeAsRuleParser
from src.core.services.keytab_loader import FileKeytabLoader
from src.core.services.name_resolution_service import NameResolutionService
from src.core.services.protocol_registry import InMemoryProtocolRegistry
from src.core.services.timestamp_display_service import TimestampDisplayService


class RecordingDiagnosticSink(IDiagnosticSink):
    """Keeps every diagnostic so tests can assert on the text."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.continuations: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def error_continuation(self, message: str) -> None:
        self.continuations.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.errors + self.continuations)


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """
    Automatically configure logging for all unit tests to ensure
    consistent output and proper environment tagging.
    """
    from src.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(level=logging.DEBUG)


@pytest.fixture
def sink() -> RecordingDiagnosticSink:
    return RecordingDiagnosticSink()


@pytest.fixture
def registry() -> InMemoryProtocolRegistry:
    return InMemoryProtocolRegistry.with_builtin_protocols()


@pytest.fixture
def name_resolver() -> NameResolutionService:
    return NameResolutionService()


@pytest.fixture
def timestamp_display() -> TimestampDisplayService:
    return TimestampDisplayService()


@pytest.fixture
def context(
    sink: RecordingDiagnosticSink,
    registry: InMemoryProtocolRegistry,
    name_resolver: NameResolutionService,
    timestamp_display: TimestampDisplayService,
) -> OptionContext:
    """A context without Kerberos support."""
    return OptionContext(
        sink=sink,
        decode_as=DecodeAsRuleParser(registry, sink),
        name_resolver=name_resolver,
        timestamp_display=timestamp_display,
    )


@pytest.fixture
def kerberos_context(context: OptionContext, sink: RecordingDiagnosticSink) -> OptionContext:
    context.keytab_loader = FileKeytabLoader(sink)
    return context


@pytest.fixture
def processor(context: OptionContext) -> OptionProcessor:
    return OptionProcessor(context)


@pytest.fixture
def options() -> DissectionOptions:
    return initialize_configuration()
