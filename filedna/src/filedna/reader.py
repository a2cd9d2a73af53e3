"""Chunked input reading from a file or standard input."""

from __future__ import annotations

import errno
import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from filedna.config import DEFAULT_CHUNK_SIZE
from filedna.errors import FileDnaError

logger = logging.getLogger(__name__)

CHUNK_SIZE = DEFAULT_CHUNK_SIZE


class InputOpenError(FileDnaError):
    """Raised when the input path cannot be opened."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"failed to open file '{path}': {_os_error_text(cause)}")
        self.path = path
        self.cause = cause


class InputReadError(FileDnaError):
    """Raised when reading the input fails mid-stream."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"failed to read input: {_os_error_text(cause)}")
        self.cause = cause


def _os_error_text(exc: OSError) -> str:
    return exc.strerror or str(exc)


@contextmanager
def open_input(path: Path | None) -> Iterator[BinaryIO]:
    """Yield a binary handle for ``path``, or for standard input when ``None``.

    A file handle is closed on exit, including error paths. Standard input
    stays open.
    """

    if path is None:
        # sys.stdin is None when the process started with fd 0 closed.
        if sys.stdin is None:
            raise InputReadError(OSError(errno.EBADF, os.strerror(errno.EBADF)))
        logger.debug("reading from standard input")
        yield sys.stdin.buffer
        return

    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputOpenError(path, exc) from exc
    logger.debug("reading from %s", path)
    try:
        yield handle
    finally:
        handle.close()


def iter_chunks(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as exc:
            raise InputReadError(exc) from exc
        if not chunk:
            return
        yield chunk
