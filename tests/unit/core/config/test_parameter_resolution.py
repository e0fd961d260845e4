import logging

import pytest
from src.core.config.app_config import AppConfig
from src.core.config.parameter_resolution import ParameterResolution, ParameterSource


@pytest.fixture()
def logger_name() -> str:
    return "parameter-resolution-test"


def test_logging_records_defaults(
    caplog: pytest.LogCaptureFixture, logger_name: str
) -> None:
    resolution = ParameterResolution()

    with caplog.at_level(logging.DEBUG, logger=logger_name):
        resolution.log(logging.getLogger(logger_name), AppConfig())

    assert "program_name" in caplog.text
    assert "(default)" in caplog.text


def test_logging_names_the_origin(
    caplog: pytest.LogCaptureFixture, logger_name: str
) -> None:
    resolution = ParameterResolution()
    resolution.record("log_level", "DEBUG", ParameterSource.ENVIRONMENT, origin="DISSECT_LOG_LEVEL")

    with caplog.at_level(logging.DEBUG, logger=logger_name):
        resolution.log(logging.getLogger(logger_name), AppConfig(log_level="DEBUG"))

    assert "log_level = 'DEBUG' (environment DISSECT_LOG_LEVEL)" in caplog.text


def test_last_record_wins_in_report() -> None:
    resolution = ParameterResolution()
    resolution.record("t", "a", ParameterSource.CLI, origin="-t")
    resolution.record("t", "r.3", ParameterSource.CLI, origin="-t")

    report = resolution.build_report()

    assert [(r.name, r.value) for r in report] == [("t", "r.3")]


def test_report_uses_the_source_of_the_last_record() -> None:
    resolution = ParameterResolution()
    resolution.record("log_level", "INFO", ParameterSource.CONFIG_FILE)
    resolution.record("log_level", "DEBUG", ParameterSource.CLI, origin="--log-level")

    (entry,) = resolution.build_report()

    assert entry.value == "DEBUG"
    assert entry.source is ParameterSource.CLI
    assert entry.origin == "--log-level"


def test_report_rejects_unknown_config_type() -> None:
    with pytest.raises(TypeError):
        ParameterResolution().build_report(object())
