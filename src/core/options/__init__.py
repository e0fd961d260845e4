# Dissection options package

from src.core.options.applicator import (
    ProtocolApplicationResult,
    ProtocolConfigurationApplicator,
    apply_protocol_configuration,
)
from src.core.options.context import OptionContext
from src.core.options.option_codes import (
    LONGOPT_DISSECT_COMMON,
    OPTSTRING_DISSECT_COMMON,
    OptionCode,
)
from src.core.options.processor import (
    OptionProcessor,
    handle_option,
    initialize_configuration,
)

__all__ = [
    "LONGOPT_DISSECT_COMMON",
    "OPTSTRING_DISSECT_COMMON",
    "OptionCode",
    "OptionContext",
    "OptionProcessor",
    "ProtocolApplicationResult",
    "ProtocolConfigurationApplicator",
    "apply_protocol_configuration",
    "handle_option",
    "initialize_configuration",
]
