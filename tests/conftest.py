from pathlib import Path

import pytest


# Keep config tests independent of the developer's shell environment
@pytest.fixture(autouse=True)
def _clear_dissect_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DISSECT_PROGRAM_NAME",
        "DISSECT_LOG_LEVEL",
        "DISSECT_LOG_FILE",
        "DISSECT_KERBEROS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    cfg = tmp_path / "dissect.yaml"
    cfg.write_text(
        "program_name: tshark-lite\nlog_level: info\nkerberos_support: true\n",
        encoding="utf-8",
    )
    return cfg


@pytest.fixture
def keytab_path(tmp_path: Path) -> Path:
    path = tmp_path / "krb5.keytab"
    path.write_bytes(b"\x05\x02" + b"\x00" * 30)
    return path
