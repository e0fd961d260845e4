"""
Collaborators an option handler may call.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.interfaces.decode_as_interface import IDecodeAsParser
from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.interfaces.keytab_loader_interface import IKeytabLoader
from src.core.interfaces.model_bases import InternalDTO
from src.core.interfaces.name_resolver_interface import INameResolver
from src.core.interfaces.timestamp_display_interface import ITimestampDisplay


@dataclass
class OptionContext(InternalDTO):
    """
    The external capabilities used while processing options.

    Attributes:
        sink: Where user-facing diagnostics are written.
        decode_as: Parser for ``-d`` rules.
        name_resolver: Target of ``-n`` and ``-N``.
        timestamp_display: Target of ``-u``.
        keytab_loader: Loader for ``-K``; None when Kerberos support is absent.
    """

    sink: IDiagnosticSink
    decode_as: IDecodeAsParser
    name_resolver: INameResolver
    timestamp_display: ITimestampDisplay
    keytab_loader: IKeytabLoader | None = None

    @property
    def kerberos_supported(self) -> bool:
        return self.keytab_loader is not None
