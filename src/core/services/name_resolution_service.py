from __future__ import annotations

import logging

from src.core.domain.name_resolution import (
    NameResolutionFlags,
    parse_resolution_flags,
)
from src.core.interfaces.name_resolver_interface import INameResolver

logger = logging.getLogger(__name__)


class NameResolutionService(INameResolver):
    """Holds the process-wide name resolution flags."""

    def __init__(self, flags: NameResolutionFlags | None = None) -> None:
        self.flags = flags or NameResolutionFlags()

    def disable_name_resolution(self) -> None:
        self.flags = NameResolutionFlags.disabled()
        logger.debug("Name resolution disabled")

    def set_resolution_flags(self, flag_string: str) -> str | None:
        flags, bad_letter = parse_resolution_flags(flag_string, self.flags)
        if bad_letter is not None:
            logger.debug(
                "Rejected resolution flags %r at %r", flag_string, bad_letter
            )
            return bad_letter
        self.flags = flags
        logger.debug("Name resolution enabled for: %s", ", ".join(flags.enabled_names()))
        return None
