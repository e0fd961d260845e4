from __future__ import annotations

import logging
import sys
from typing import TextIO

from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink

logger = logging.getLogger(__name__)


class StderrDiagnosticSink(IDiagnosticSink):
    """Write command-line errors to stderr, prefixed with the program name.

    Continuation text is written verbatim so tab-indented vocabularies line
    up under the error they belong to.
    """

    def __init__(self, program_name: str, stream: TextIO | None = None) -> None:
        self._program_name = program_name
        self._stream = stream
        self.error_count = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def error(self, message: str) -> None:
        self.error_count += 1
        logger.debug("Command-line error #%d: %s", self.error_count, message)
        self.stream.write(f"{self._program_name}: {message}\n")
        self.stream.flush()

    def error_continuation(self, message: str) -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()
