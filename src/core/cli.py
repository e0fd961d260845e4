"""
Command-line front end for the dissection options.

argparse tokenizes argv; every dissection option is recorded as a
``(OptionCode, argument)`` pair in command-line order and then handed to the
option processor one at a time, followed by a single application pass
against the protocol registry.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from src.core.common.exceptions import ConfigurationError
from src.core.common.logging_utils import configure_logging_with_environment_tagging
from src.core.config.app_config import DEFAULT_PROGRAM_NAME, AppConfig, LogLevel, load_config
from src.core.config.parameter_resolution import ParameterResolution, ParameterSource
from src.core.domain.dissect_options import DissectionOptions
from src.core.interfaces.diagnostic_sink_interface import IDiagnosticSink
from src.core.options.applicator import apply_protocol_configuration
from src.core.options.context import OptionContext
from src.core.options.option_codes import OptionCode, takes_argument
from src.core.options.processor import OptionProcessor, initialize_configuration
from src.core.options.registry import get_option_handler, import_option_handlers
from src.core.services.decode_as_service import DecodeAsRuleParser
from src.core.services.diagnostic_sink import StderrDiagnosticSink
from src.core.services.keytab_loader import FileKeytabLoader
from src.core.services.name_resolution_service import NameResolutionService
from src.core.services.protocol_registry import InMemoryProtocolRegistry
from src.core.services.timestamp_display_service import TimestampDisplayService

logger = logging.getLogger(__name__)

DISSECT_OPTIONS_DEST = "dissect_options"


class RecordDissectOption(argparse.Action):
    """Append ``(code, value)`` to a shared list so command-line order survives."""

    def __init__(self, option_strings: list[str], dest: str, code: OptionCode, **kwargs: Any) -> None:
        self.code = code
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        recorded = list(getattr(namespace, self.dest, None) or [])
        recorded.append((self.code, values if takes_argument(self.code) else None))
        setattr(namespace, self.dest, recorded)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog=DEFAULT_PROGRAM_NAME,
        allow_abbrev=False,
        description="Validate dissection options and apply them to the protocol registry",
    )

    import_option_handlers()
    group = parser.add_argument_group("Processing")
    for code in OptionCode:
        handler_cls = get_option_handler(code)
        if handler_cls is None:
            continue
        handler = handler_cls()
        kwargs: dict[str, Any] = {
            "action": RecordDissectOption,
            "code": code,
            "dest": DISSECT_OPTIONS_DEST,
            "help": f"{handler.description} ({handler.format})",
        }
        if takes_argument(code):
            kwargs["metavar"] = code.name.lower()
        else:
            kwargs["nargs"] = 0
        group.add_argument(code.flag, **kwargs)

    parser.add_argument("--config", dest="config_file", help="YAML settings file")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", dest="log_file", help="Also write logs to this file")
    parser.add_argument(
        "--kerberos",
        dest="kerberos_support",
        action="store_true",
        default=None,
        help="Enable Kerberos keytab support for -K",
    )
    parser.add_argument(
        "--list-options",
        action="store_true",
        help="Describe every dissection option and exit",
    )
    return parser


def parse_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(
    args: argparse.Namespace, resolution: ParameterResolution | None = None
) -> AppConfig:
    """Load settings and apply CLI overrides on top of them."""
    res = resolution or ParameterResolution()
    config = load_config(args.config_file, resolution=res)

    for name in ("log_level", "log_file", "kerberos_support"):
        value = getattr(args, name, None)
        if value is None:
            continue
        setattr(config, name, value)
        res.record(name, value, ParameterSource.CLI, origin=f"--{name.replace('_', '-')}")
    return config


def build_option_context(
    config: AppConfig,
    registry: InMemoryProtocolRegistry,
    sink: IDiagnosticSink,
    *,
    name_resolver: NameResolutionService | None = None,
    timestamp_display: TimestampDisplayService | None = None,
) -> OptionContext:
    return OptionContext(
        sink=sink,
        decode_as=DecodeAsRuleParser(registry, sink),
        name_resolver=name_resolver or NameResolutionService(),
        timestamp_display=timestamp_display or TimestampDisplayService(),
        keytab_loader=FileKeytabLoader(sink) if config.kerberos_support else None,
    )


def describe_options() -> list[str]:
    import_option_handlers()
    lines: list[str] = []
    for code in OptionCode:
        handler_cls = get_option_handler(code)
        if handler_cls is None:
            continue
        handler = handler_cls()
        lines.append(f"  {handler.format}")
        lines.append(f"      {handler.description}")
        for example in handler.examples:
            lines.append(f"      e.g. {example}")
    return lines


def process_dissect_options(
    recorded: Sequence[tuple[OptionCode, str | None]],
    processor: OptionProcessor,
    options: DissectionOptions,
) -> bool:
    """Feed recorded options to the processor, stopping at the first failure."""
    for code, value in recorded:
        if not processor.handle_option(options, code, value):
            return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_cli_args(argv)

    if args.list_options:
        print("\n".join(describe_options()))
        return 0

    resolution = ParameterResolution()
    try:
        config = apply_cli_args(args, resolution)
    except ConfigurationError as exc:
        sys.stderr.write(f"{DEFAULT_PROGRAM_NAME}: {exc.message}\n")
        return 2

    configure_logging_with_environment_tagging(
        level=config.log_level.to_logging_level(), log_file=config.log_file
    )

    sink = StderrDiagnosticSink(config.program_name)
    registry = InMemoryProtocolRegistry.with_builtin_protocols()
    name_resolver = NameResolutionService()
    timestamp_display = TimestampDisplayService()
    context = build_option_context(
        config,
        registry,
        sink,
        name_resolver=name_resolver,
        timestamp_display=timestamp_display,
    )
    processor = OptionProcessor(context, resolution)
    options = initialize_configuration()

    if not process_dissect_options(
        getattr(args, DISSECT_OPTIONS_DEST, None) or [], processor, options
    ):
        return 1

    if not options.has_protocol_changes():
        logger.debug("No protocol or heuristic changes to apply")
    elif not apply_protocol_configuration(options, registry, sink):
        return 1

    resolution.log(logger, config)

    lines = options.summary_lines()
    lines.append(f"seconds_type: {timestamp_display.seconds_type.value}")
    enabled = name_resolver.flags.enabled_names()
    lines.append(f"name_resolution: {', '.join(enabled) if enabled else '-'}")
    print("\n".join(lines))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
