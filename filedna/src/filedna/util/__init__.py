"""Digest and number formatting helpers."""

from .hashing import DigestAccumulator, digest_chunks
from .numeric import digest_to_int, format_decimal, format_hex, render

__all__ = [
    "DigestAccumulator",
    "digest_chunks",
    "digest_to_int",
    "format_decimal",
    "format_hex",
    "render",
]
