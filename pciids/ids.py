#!/usr/bin/python
#
# Python pciids library
# Identifier decoding for pci.ids fields
#
# (c) 2025 Steven Noonan
# Licensed under the MIT license
#

from __future__ import annotations
import string
from typing import Optional, Tuple

from .errors import InvalidIntegerError, MalformedLineError

_HEXDIGITS = frozenset(string.hexdigits)


def parse_hex(
    field: str, bits: int, lineno: Optional[int] = None, line: Optional[str] = None
) -> int:
    """
    Decode a bare hex field ("8086", "0c") into an unsigned int of `bits` width.

    int(x, 16) alone would also accept "0x10", "+1", "1_0" and surrounding
    whitespace, none of which appear in pci.ids.
    """
    s = field.strip()
    if not s or not _HEXDIGITS.issuperset(s):
        raise InvalidIntegerError(f"invalid hex id {field!r}", lineno, line)
    value = int(s, 16)
    if value >> bits:
        raise InvalidIntegerError(
            f"id {field!r} does not fit in {bits} bits", lineno, line
        )
    return value


def parse_hex_pair(
    field: str, bits: int = 16, lineno: Optional[int] = None, line: Optional[str] = None
) -> Tuple[int, int]:
    # "ssss dddd" -> (subvendor, subdevice)
    parts = field.strip().split(" ")
    if len(parts) != 2:
        raise MalformedLineError(
            "expected 'subvendor subdevice' id pair", lineno, line
        )
    return (
        parse_hex(parts[0], bits, lineno, line),
        parse_hex(parts[1], bits, lineno, line),
    )
