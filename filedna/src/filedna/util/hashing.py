"""Streaming SHA-256 accumulation for content fingerprints."""

from __future__ import annotations

import hashlib
from typing import Iterable

from filedna.errors import FileDnaError

DIGEST_SIZE = 32


class AccumulatorFinalizedError(FileDnaError):
    """Raised when a finalized accumulator is used again."""


class DigestAccumulator:
    """Incremental SHA-256 over an ordered sequence of chunks.

    ``update`` may be called any number of times; ``finalize`` exactly once,
    after which the accumulator is spent.
    """

    def __init__(self) -> None:
        self._hash = hashlib.sha256()
        self._bytes_consumed = 0
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def bytes_consumed(self) -> int:
        return self._bytes_consumed

    def update(self, chunk: bytes) -> None:
        if self._finalized:
            raise AccumulatorFinalizedError("cannot update a finalized digest")
        self._hash.update(chunk)
        self._bytes_consumed += len(chunk)

    def finalize(self) -> bytes:
        if self._finalized:
            raise AccumulatorFinalizedError("digest already finalized")
        self._finalized = True
        return self._hash.digest()


def digest_chunks(chunks: Iterable[bytes]) -> bytes:
    accumulator = DigestAccumulator()
    for chunk in chunks:
        accumulator.update(chunk)
    return accumulator.finalize()
