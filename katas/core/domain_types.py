"""Domain Types: enums and value types shared across the core.

Invariants:
    - Criterion tags and strength bands are str Enums, never raw string matching
    - PasswordCriterion declaration order IS the checklist order
    - RomanNumeral wraps str; YearNumber wraps int

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

RomanNumeral = NewType("RomanNumeral", str)
YearNumber = NewType("YearNumber", int)


# ─── Ranges ──────────────────────────────────────────────────────

NUMBER_WORDS_MIN: int = 0
NUMBER_WORDS_MAX: int = 999
ROMAN_MIN: int = 1
ROMAN_MAX: int = 3999


# ─── Enums ───────────────────────────────────────────────────────

class PasswordStrength(str, Enum):
    """Strength bands, weakest first."""
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class PasswordCriterion(str, Enum):
    """Failure tags. The first five are the base criteria, in checklist order."""
    TOO_SHORT = "too_short"
    NO_UPPERCASE = "no_uppercase"
    NO_LOWERCASE = "no_lowercase"
    NO_DIGIT = "no_digit"
    NO_SPECIAL_CHAR = "no_special_char"
    # weak-pattern extension
    COMMON_PASSWORD = "common_password"
    SEQUENTIAL_CHARS = "sequential_chars"
    REPEATED_CHARS = "repeated_chars"


BASE_CRITERIA: tuple[PasswordCriterion, ...] = (
    PasswordCriterion.TOO_SHORT,
    PasswordCriterion.NO_UPPERCASE,
    PasswordCriterion.NO_LOWERCASE,
    PasswordCriterion.NO_DIGIT,
    PasswordCriterion.NO_SPECIAL_CHAR,
)


class CalculatorOperation(str, Enum):
    """The four binary operations of the calculator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
