from pathlib import Path

import pytest
from src.core.common.exceptions import ConfigurationError
from src.core.config.app_config import AppConfig, LogLevel, load_config
from src.core.config.parameter_resolution import ParameterResolution, ParameterSource


def test_defaults() -> None:
    config = load_config(environ={})

    assert config.program_name == "dissect-opts"
    assert config.log_level is LogLevel.WARNING
    assert config.log_file is None
    assert config.kerberos_support is False


def test_environment_overrides_defaults() -> None:
    resolution = ParameterResolution()
    config = load_config(
        environ={
            "DISSECT_LOG_LEVEL": "debug",
            "DISSECT_KERBEROS": "yes",
            "DISSECT_PROGRAM_NAME": "tshark",
        },
        resolution=resolution,
    )

    assert config.log_level is LogLevel.DEBUG
    assert config.kerberos_support is True
    assert config.program_name == "tshark"
    report = {entry.name: entry for entry in resolution.build_report(config)}
    assert report["kerberos_support"].source is ParameterSource.ENVIRONMENT
    assert report["kerberos_support"].origin == "DISSECT_KERBEROS"
    assert report["log_file"].source is ParameterSource.DEFAULT


def test_config_file_is_loaded(temp_config_path: Path) -> None:
    config = load_config(temp_config_path, environ={})

    assert config.program_name == "tshark-lite"
    assert config.log_level is LogLevel.INFO
    assert config.kerberos_support is True


def test_environment_beats_config_file(temp_config_path: Path) -> None:
    config = load_config(temp_config_path, environ={"DISSECT_KERBEROS": "0"})

    assert config.kerberos_support is False
    assert config.program_name == "tshark-lite"


def test_missing_config_file_falls_back_to_defaults(tmp_path: Path, caplog) -> None:
    config = load_config(tmp_path / "absent.yaml", environ={})

    assert config == AppConfig()
    assert "Configuration file not found" in caplog.text


def test_unsupported_file_format(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unsupported configuration file format"):
        load_config(path, environ={})


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("colour: blue\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(path, environ={})


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_config(path, environ={})


def test_invalid_log_level() -> None:
    with pytest.raises(ConfigurationError):
        load_config(environ={"DISSECT_LOG_LEVEL": "chatty"})


def test_log_level_maps_to_logging_constant() -> None:
    assert LogLevel.ERROR.to_logging_level() == 40
