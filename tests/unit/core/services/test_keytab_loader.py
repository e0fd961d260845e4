import io

from src.core.services.diagnostic_sink import StderrDiagnosticSink
from src.core.services.keytab_loader import FileKeytabLoader


def test_loads_keytab_file(sink, keytab_path) -> None:
    loader = FileKeytabLoader(sink)

    loader.load(str(keytab_path))

    assert loader.loaded == {str(keytab_path): 32}
    assert sink.errors == []


def test_missing_file_is_reported_not_raised(sink, tmp_path) -> None:
    loader = FileKeytabLoader(sink)
    path = tmp_path / "absent.keytab"

    loader.load(str(path))

    assert loader.loaded == {}
    assert sink.errors == [
        f'Could not open keytab file "{path}": No such file or directory'
    ]


def test_file_without_keytab_header_is_rejected(sink, tmp_path) -> None:
    path = tmp_path / "not-a-keytab"
    path.write_bytes(b"hello world")
    loader = FileKeytabLoader(sink)

    loader.load(str(path))

    assert loader.loaded == {}
    assert sink.errors == [f'"{path}" is not a keytab file']


def test_unreadable_keytab_counts_as_an_error(tmp_path) -> None:
    stream = io.StringIO()
    sink = StderrDiagnosticSink("dissect-opts", stream)
    path = tmp_path / "absent.keytab"

    FileKeytabLoader(sink).load(str(path))

    assert sink.error_count == 1
    assert stream.getvalue().startswith(f'dissect-opts: Could not open keytab file "{path}"')
