"""
Applies the accumulated protocol and heuristic name lists to a registry.

Plain protocol enable/disable calls have no failure channel. Heuristic names
are checked one by one: an unknown name is reported and counted, and the
remaining names are still applied. Nothing is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.core.common.exceptions import UnknownHeuristicNameError
from src.core.common.logging_utils import LogContext, get_logger
from src.core.domain.dissect_options import DissectionOptions
from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.interfaces.model_bases import InternalDTO
from src.core.interfaces.protocol_registry_interface import IProtocolRegistry

logger = get_logger(__name__)


@dataclass
class ProtocolApplicationResult(InternalDTO):
    failures: list[UnknownHeuristicNameError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def unresolved_names(self) -> list[str]:
        return [failure.name for failure in self.failures]


class ProtocolConfigurationApplicator:
    """Pushes the four name lists of a :class:`DissectionOptions` into a registry."""

    def __init__(self, registry: IProtocolRegistry, sink: IDiagnosticSink) -> None:
        self._registry = registry
        self._sink = sink

    def apply(self, options: DissectionOptions) -> ProtocolApplicationResult:
        result = ProtocolApplicationResult()

        for name in tuple(options.disable_protocol_names):
            self._registry.disable_protocol_by_name(name)
        for name in tuple(options.enable_protocol_names):
            self._registry.enable_protocol_by_name(name)

        self._apply_heuristics(tuple(options.enable_heuristic_names), True, result)
        self._apply_heuristics(tuple(options.disable_heuristic_names), False, result)

        logger.info(
            "protocol_configuration_applied",
            disabled=len(options.disable_protocol_names),
            enabled=len(options.enable_protocol_names),
            heuristics_enabled=len(options.enable_heuristic_names),
            heuristics_disabled=len(options.disable_heuristic_names),
            unresolved=result.unresolved_names,
        )
        return result

    def _apply_heuristics(
        self,
        names: tuple[str, ...],
        enable: bool,
        result: ProtocolApplicationResult,
    ) -> None:
        with LogContext(logger, enable=enable) as log:
            for name in names:
                if self._registry.enable_heuristic_by_name(name, enable):
                    log.debug("heuristic_applied", name=name)
                    continue
                failure = UnknownHeuristicNameError(name, enable)
                log.warning("heuristic_not_found", name=name)
                self._sink.error(failure.message)
                result.failures.append(failure)


def apply_protocol_configuration(
    options: DissectionOptions,
    registry: IProtocolRegistry,
    sink: IDiagnosticSink,
) -> bool:
    """Apply ``options`` to ``registry``.

    Returns:
        False if any heuristic name could not be resolved.
    """
    return ProtocolConfigurationApplicator(registry, sink).apply(options).success
