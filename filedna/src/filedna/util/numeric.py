"""Big-endian digest decoding and decimal/hex rendering."""

from __future__ import annotations


def digest_to_int(digest: bytes) -> int:
    return int.from_bytes(digest, "big")


def _require_unsigned(value: int) -> None:
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")


def format_decimal(value: int) -> str:
    _require_unsigned(value)
    return str(value)


def format_hex(value: int) -> str:
    """Lowercase hex with an even number of digits; zero renders as ``"0"``."""

    _require_unsigned(value)
    if value == 0:
        return "0"
    digits = format(value, "x")
    if len(digits) % 2:
        digits = "0" + digits
    return digits


def render(digest: bytes, *, hex_output: bool = False) -> str:
    value = digest_to_int(digest)
    if hex_output:
        return format_hex(value)
    return format_decimal(value)
