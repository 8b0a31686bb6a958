import errno
import io
import sys

from oslabs.streams import CHUNK_SIZE, copy_stream, main


def test_copy_stream_round_trip():
    data = b"hello\nworld\n"
    sink = io.BytesIO()
    count = copy_stream(io.BytesIO(data), sink)
    assert sink.getvalue() == data
    assert count == len(data)


def test_copy_stream_spans_many_chunks():
    data = bytes(range(256)) * (3 * CHUNK_SIZE // 256 + 7)
    sink = io.BytesIO()
    assert copy_stream(io.BytesIO(data), sink) == len(data)
    assert sink.getvalue() == data


def test_copy_stream_empty_source():
    sink = io.BytesIO()
    assert copy_stream(io.BytesIO(b""), sink) == 0
    assert sink.getvalue() == b""


def test_main_copies_named_file(tmp_path, capsysbinary):
    path = tmp_path / "input.bin"
    path.write_bytes(b"file contents\x00\xff")
    assert main([str(path)]) == 0
    assert capsysbinary.readouterr().out == b"file contents\x00\xff"


def test_main_copies_stdin(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"from stdin"


def test_main_rejects_extra_arguments(capsysbinary):
    assert main(["a", "b"]) == errno.EINVAL
    assert capsysbinary.readouterr().out == b""


def test_main_reports_missing_file(tmp_path, capsysbinary):
    assert main([str(tmp_path / "missing")]) == errno.ENOENT
    assert capsysbinary.readouterr().err.startswith(b"open:")