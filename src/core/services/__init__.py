# Services package

from .decode_as_service import DecodeAsRuleParser
from .diagnostic_sink import StderrDiagnosticSink
from .keytab_loader import FileKeytabLoader
from .name_resolution_service import NameResolutionService
from .protocol_registry import InMemoryProtocolRegistry
from .timestamp_display_service import TimestampDisplayService

__all__ = [
    "DecodeAsRuleParser",
    "FileKeytabLoader",
    "InMemoryProtocolRegistry",
    "NameResolutionService",
    "StderrDiagnosticSink",
    "TimestampDisplayService",
]
