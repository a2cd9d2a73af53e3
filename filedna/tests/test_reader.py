from __future__ import annotations

import errno
import io
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from filedna.reader import CHUNK_SIZE, InputOpenError, InputReadError, iter_chunks, open_input


class _FailingStream(io.RawIOBase):
    def __init__(self, good: bytes) -> None:
        self._good = good

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._good:
            chunk, self._good = self._good[:size], self._good[size:]
            return chunk
        raise OSError(errno.EIO, "Input/output error")


def test_default_chunk_size_is_64_kib() -> None:
    assert CHUNK_SIZE == 65536


def test_iter_chunks_splits_on_chunk_size() -> None:
    chunks = list(iter_chunks(io.BytesIO(b"abcdefg"), chunk_size=3))

    assert chunks == [b"abc", b"def", b"g"]


def test_iter_chunks_on_empty_stream() -> None:
    assert list(iter_chunks(io.BytesIO(b""))) == []


def test_iter_chunks_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        list(iter_chunks(io.BytesIO(b"abc"), chunk_size=0))


def test_read_failure_is_reported() -> None:
    stream = _FailingStream(b"abcd")

    with pytest.raises(InputReadError) as excinfo:
        list(iter_chunks(stream, chunk_size=2))

    assert str(excinfo.value) == "failed to read input: Input/output error"


def test_open_missing_file_reports_path(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist.bin"

    with pytest.raises(InputOpenError) as excinfo:
        with open_input(missing):
            pass

    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)
    assert "No such file or directory" in str(excinfo.value)


def test_open_input_closes_file_on_error(tmp_path: Path) -> None:
    target = tmp_path / "input.bin"
    target.write_bytes(b"abc")

    with pytest.raises(RuntimeError):
        with open_input(target) as handle:
            raise RuntimeError("boom")

    assert handle.closed


def test_open_input_without_path_uses_stdin() -> None:
    fake_stdin = SimpleNamespace(buffer=io.BytesIO(b"piped"))

    with patch("sys.stdin", fake_stdin):
        with open_input(None) as handle:
            assert handle.read() == b"piped"

    assert not fake_stdin.buffer.closed


def test_open_input_with_closed_stdin_is_a_read_failure() -> None:
    with patch("sys.stdin", None):
        with pytest.raises(InputReadError) as excinfo:
            with open_input(None):
                pass

    assert str(excinfo.value) == "failed to read input: Bad file descriptor"
