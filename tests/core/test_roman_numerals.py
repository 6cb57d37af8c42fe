"""Roman Numerals: tests for encoding, decoding and strict grammar.

Tests cover:
    - Reference conversions in both directions
    - Round trip over the full 1..3999 domain
    - Range errors for to_roman
    - Malformed input for from_roman (empty, invalid symbols, lowercase)
    - Lenient decoding of non-canonical numerals vs strict rejection
"""

import pytest

from katas.core.errors import DomainRangeError, MalformedRomanNumeralError
from katas.core.roman_numerals import from_roman, is_valid_roman, to_roman


@pytest.mark.parametrize("n, numeral", [
    (1, "I"),
    (3, "III"),
    (4, "IV"),
    (9, "IX"),
    (14, "XIV"),
    (40, "XL"),
    (58, "LVIII"),
    (90, "XC"),
    (400, "CD"),
    (900, "CM"),
    (1994, "MCMXCIV"),
    (2023, "MMXXIII"),
    (3999, "MMMCMXCIX"),
])
def test_reference_conversions(n, numeral):
    assert to_roman(n) == numeral
    assert from_roman(numeral) == n
    assert from_roman(numeral, strict=True) == n


def test_round_trip_full_domain():
    for n in range(1, 4000):
        assert from_roman(to_roman(n)) == n


@pytest.mark.parametrize("n", [0, -1, 4000, 10_000])
def test_to_roman_out_of_range_raises(n):
    with pytest.raises(DomainRangeError) as exc_info:
        to_roman(n)
    assert exc_info.value.code == "DOMAIN_RANGE"


@pytest.mark.parametrize("numeral", ["", "ABC", "XIZ", "mcm", "X I"])
def test_from_roman_rejects_malformed(numeral):
    with pytest.raises(MalformedRomanNumeralError) as exc_info:
        from_roman(numeral)
    assert exc_info.value.code == "MALFORMED_ROMAN"


def test_malformed_roman_is_a_domain_range_error():
    with pytest.raises(DomainRangeError):
        from_roman("Q")


@pytest.mark.parametrize("numeral, value", [
    ("IIII", 4),
    ("VV", 10),
    ("IC", 99),
    ("XM", 990),
    ("MMMM", 4000),
])
def test_lenient_mode_decodes_non_canonical(numeral, value):
    assert from_roman(numeral) == value


@pytest.mark.parametrize("numeral", ["IIII", "VV", "IC", "XM", "MMMM", "IIV", "LC"])
def test_strict_mode_rejects_non_canonical(numeral):
    with pytest.raises(MalformedRomanNumeralError):
        from_roman(numeral, strict=True)


def test_is_valid_roman():
    assert is_valid_roman("MCMXCIV") is True
    assert is_valid_roman("IIII") is False
    assert is_valid_roman("") is False
    assert is_valid_roman("abc") is False
