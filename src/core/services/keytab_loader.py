from __future__ import annotations

import logging
from pathlib import Path

from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.interfaces.keytab_loader_interface import IKeytabLoader

logger = logging.getLogger(__name__)

# MIT/Heimdal keytab files start with 0x05 followed by the format version.
KEYTAB_MAGIC = (b"\x05\x01", b"\x05\x02")


class FileKeytabLoader(IKeytabLoader):
    """Read Kerberos keytab files named on the command line.

    Loading reports problems through the diagnostic sink but never fails the
    option that requested it.
    """

    def __init__(self, sink: IDiagnosticSink) -> None:
        self._sink = sink
        # Path -> size in bytes of every keytab read successfully.
        self.loaded: dict[str, int] = {}

    def load(self, path: str) -> None:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            logger.warning("Could not read keytab file %s: %s", path, exc)
            self._sink.error(f'Could not open keytab file "{path}": {exc.strerror}')
            return

        if data[:2] not in KEYTAB_MAGIC:
            logger.warning("Keytab file %s has no keytab header", path)
            self._sink.error(f'"{path}" is not a keytab file')
            return

        self.loaded[path] = len(data)
        logger.info("Loaded keytab file %s (%d bytes)", path, len(data))
