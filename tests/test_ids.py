# tests/test_ids.py
from __future__ import annotations
import pytest
from pciids.errors import InvalidIntegerError, MalformedLineError, PciIdsError
from pciids.ids import parse_hex, parse_hex_pair


@pytest.mark.parametrize(
    "field,bits,expected",
    [
        ("8086", 16, 0x8086),
        ("0e11", 16, 0x0E11),
        ("FFFF", 16, 0xFFFF),
        ("0c", 8, 0x0C),
        ("fe", 8, 0xFE),
        (" 02 ", 8, 0x02),
    ],
)
def test_parse_hex(field, bits, expected):
    assert parse_hex(field, bits) == expected


@pytest.mark.parametrize("field", ["", "zz", "0x10", "+10", "1_0", "-1", "12 34", "g000"])
def test_parse_hex_rejects_non_hex(field):
    with pytest.raises(InvalidIntegerError):
        parse_hex(field, 16)


def test_parse_hex_overflow():
    with pytest.raises(InvalidIntegerError) as ei:
        parse_hex("100", 8, 42, "C 100  Too big")
    assert ei.value.lineno == 42
    assert "8 bits" in str(ei.value)
    with pytest.raises(InvalidIntegerError):
        parse_hex("10000", 16)


def test_invalid_integer_is_value_error():
    with pytest.raises(ValueError):
        parse_hex("xyz", 16)
    assert issubclass(InvalidIntegerError, PciIdsError)


def test_parse_hex_pair():
    assert parse_hex_pair("0e11 409d") == (0x0E11, 0x409D)


@pytest.mark.parametrize("field", ["0e11", "0e11  409d", "0e11 409d 0000", "0e11\t409d"])
def test_parse_hex_pair_malformed(field):
    with pytest.raises(MalformedLineError):
        parse_hex_pair(field)


def test_parse_hex_pair_invalid_hex():
    with pytest.raises(InvalidIntegerError):
        parse_hex_pair("0e11 40zz")
