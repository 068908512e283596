"""Strict decimal integer parsing."""

import re

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


def must_atoi(text: str) -> int:
    """Parse a signed 64-bit decimal integer, raising ValueError on bad input."""
    if not _SIGNED.fullmatch(text):
        raise ValueError(f"invalid integer syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def must_atoui(text: str) -> int:
    """Parse an unsigned 64-bit decimal integer, raising ValueError on bad input."""
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid unsigned integer syntax: {text!r}")
    value = int(text)
    if value > _UINT64_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value