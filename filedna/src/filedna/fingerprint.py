"""Content fingerprints: a SHA-256 digest read as a big-endian integer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from filedna.config import chunk_size as configured_chunk_size
from filedna.reader import iter_chunks, open_input
from filedna.util.hashing import DigestAccumulator, digest_chunks
from filedna.util.numeric import digest_to_int, format_decimal, format_hex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fingerprint:
    digest: bytes

    @property
    def value(self) -> int:
        return digest_to_int(self.digest)

    @property
    def decimal(self) -> str:
        return format_decimal(self.value)

    @property
    def hex(self) -> str:
        return format_hex(self.value)

    def render(self, hex_output: bool = False) -> str:
        return self.hex if hex_output else self.decimal


def fingerprint_stream(stream: BinaryIO, *, chunk_size: int | None = None) -> Fingerprint:
    """Digest ``stream`` until it is exhausted.

    ``chunk_size`` defaults to the configured read size (``FILEDNA_CHUNK_SIZE``).
    """

    size = configured_chunk_size() if chunk_size is None else chunk_size
    logger.debug("chunk size %d", size)

    accumulator = DigestAccumulator()
    for chunk in iter_chunks(stream, size):
        accumulator.update(chunk)
    digest = accumulator.finalize()

    logger.debug("consumed %d bytes, digest %s", accumulator.bytes_consumed, digest.hex())
    return Fingerprint(digest)


def fingerprint_path(path: Path | None, *, chunk_size: int | None = None) -> Fingerprint:
    with open_input(path) as stream:
        return fingerprint_stream(stream, chunk_size=chunk_size)


def sha256_file(path: Path) -> str:
    with open_input(path) as fh:
        return digest_chunks(iter_chunks(fh)).hex()
