from __future__ import annotations

from pathlib import Path

import pytest

from lightning.core.buffer import LinesBuffer, buffer_text, split_lines
from lightning.core.controller import Controller, KeyPress
from lightning.core.errors import FileReadError, FileWriteError, PersistenceError
from lightning.core.persistence import LocalFileSystem, PickMode, pick

from tests.harness import FakePicker


def test_local_round_trip_is_byte_identical(tmp_path: Path):
    fs = LocalFileSystem()
    p = tmp_path / "a.txt"
    text = "línea uno\nline two\n\ttabbed"
    fs.write_text(str(p), text)
    assert fs.read_text(str(p)) == text
    assert p.read_bytes() == text.encode("utf-8")


def test_read_missing_file_raises(tmp_path: Path):
    fs = LocalFileSystem()
    with pytest.raises(FileReadError) as exc:
        fs.read_text(str(tmp_path / "nope.txt"))
    assert exc.value.path.endswith("nope.txt")
    assert isinstance(exc.value, PersistenceError)


def test_read_binary_file_raises(tmp_path: Path):
    p = tmp_path / "blob.bin"
    p.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(FileReadError):
        LocalFileSystem().read_text(str(p))


def test_write_into_missing_directory_raises(tmp_path: Path):
    with pytest.raises(FileWriteError):
        LocalFileSystem().write_text(str(tmp_path / "no" / "such" / "dir.txt"), "x")


def test_empty_path_is_rejected():
    fs = LocalFileSystem()
    with pytest.raises(FileReadError):
        fs.read_text("")
    with pytest.raises(FileWriteError):
        fs.write_text("", "x")


def test_pick_dispatches_on_mode():
    picker = FakePicker(existing="in.txt", destination="out.txt")
    assert pick(picker, PickMode.OPEN) == "in.txt"
    assert pick(picker, PickMode.SAVE) == "out.txt"
    assert picker.calls == ["open", "save"]


def test_split_lines_drops_trailing_newline():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("") == []
    assert split_lines("a\r\nb") == ["a", "b"]


def test_lines_buffer_editing():
    buf = LinesBuffer(["ab"])
    buf.forward_key(KeyPress("x", "x"))
    buf.forward_key(KeyPress("enter"))
    buf.forward_key(KeyPress("y", "y"))
    assert buf.lines() == ["x", "yab"]
    buf.forward_key(KeyPress("backspace"))
    buf.forward_key(KeyPress("backspace"))
    assert buf.lines() == ["xab"]
    assert buffer_text(buf) == "xab"


def test_lines_buffer_load_replaces_everything():
    buf = LinesBuffer(["old"])
    buf.load_lines(["new", "content"])
    assert buf.lines() == ["new", "content"]
    buf.load_lines([])
    assert buf.lines() == []


def test_split_lines_breaks_on_newline_only():
    assert split_lines("a\x0cb\x0bc\x1cd\x85e\u2028f\u2029g\rh") == ["a\x0cb\x0bc\x1cd\x85e\u2028f\u2029g\rh"]
    assert split_lines("a\r\n\r\nb\n") == ["a", "", "b"]
    assert split_lines("\n") == [""]
    assert split_lines("a\n\n") == ["a", ""]


def test_open_then_save_keeps_separator_characters(tmp_path: Path):
    p = tmp_path / "page.c"
    original = "int a;\x0cint b;\ncaf\x85e\u2028end".encode("utf-8")
    p.write_bytes(original)
    ctrl = Controller(LinesBuffer(), picker=FakePicker())
    assert ctrl.open(str(p))
    assert ctrl.buffer.lines() == ["int a;\x0cint b;", "caf\x85e\u2028end"]
    assert ctrl.save()
    assert p.read_bytes() == original
