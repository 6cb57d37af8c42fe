"""Roman Numerals: bidirectional conversion between int and Roman notation.

Invariants:
    - to_roman accepts ROMAN_MIN..ROMAN_MAX only; anything else raises DomainRangeError
    - from_roman(to_roman(n)) == n for every n in range
    - from_roman rejects "" and symbols outside IVXLCDM (uppercase only)
    - strict=True accepts only canonical numerals: to_roman(from_roman(s)) == s

Design Decisions:
    - Strict grammar checked by re-encoding: the greedy encoder emits exactly the
      canonical form, so repetition limits, legal subtractive pairs and ordering
      all follow from one comparison
"""

from katas.core.domain_types import ROMAN_MAX, ROMAN_MIN, RomanNumeral
from katas.core.errors import DomainRangeError, MalformedRomanNumeralError

# descending, subtractive pairs included
ROMAN_TABLE: tuple[tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

SYMBOL_VALUES: dict[str, int] = {
    "I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000,
}


def to_roman(n: int) -> RomanNumeral:
    if not ROMAN_MIN <= n <= ROMAN_MAX:
        raise DomainRangeError(
            f"to_roman supports {ROMAN_MIN}-{ROMAN_MAX}, got {n}",
            value=n, lower=ROMAN_MIN, upper=ROMAN_MAX, exercise="to_roman",
        )
    parts: list[str] = []
    remaining = n
    for value, symbol in ROMAN_TABLE:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value
    return RomanNumeral("".join(parts))


def from_roman(numeral: str, strict: bool = False) -> int:
    """Decode a Roman numeral.

    A symbol smaller than its right-hand neighbour is subtracted, every other
    symbol is added. Lenient mode decodes any string over IVXLCDM ("IIII" -> 4,
    "IC" -> 99); strict mode additionally requires the canonical form.
    """
    if not numeral:
        raise MalformedRomanNumeralError(numeral, "empty numeral")
    invalid = sorted({ch for ch in numeral if ch not in SYMBOL_VALUES})
    if invalid:
        raise MalformedRomanNumeralError(
            numeral, f"invalid symbol(s) {', '.join(invalid)}",
        )

    values = [SYMBOL_VALUES[ch] for ch in numeral]
    total = 0
    for i, value in enumerate(values):
        if i + 1 < len(values) and value < values[i + 1]:
            total -= value
        else:
            total += value

    if strict:
        _check_canonical(numeral, total)
    return total


def _check_canonical(numeral: str, total: int) -> None:
    if not ROMAN_MIN <= total <= ROMAN_MAX:
        raise MalformedRomanNumeralError(
            numeral, f"value {total} outside {ROMAN_MIN}-{ROMAN_MAX}",
        )
    canonical = to_roman(total)
    if canonical != numeral:
        raise MalformedRomanNumeralError(
            numeral, f"not canonical, expected {canonical}",
        )


def is_valid_roman(numeral: str) -> bool:
    """True iff numeral is a canonical Roman numeral in range."""
    try:
        from_roman(numeral, strict=True)
    except MalformedRomanNumeralError:
        return False
    return True
