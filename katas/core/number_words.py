"""Number to Words: English words for integers 0-999.

Invariants:
    - Domain is NUMBER_WORDS_MIN..NUMBER_WORDS_MAX; anything else raises DomainRangeError
    - Segments joined by single spaces, no hyphens, no "and", no stray whitespace
    - 0 is "zero"; zero never appears inside a larger number
"""

from katas.core.domain_types import NUMBER_WORDS_MAX, NUMBER_WORDS_MIN
from katas.core.errors import DomainRangeError

ONES: tuple[str, ...] = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

# indexed by tens digit; 0 and 1 are covered by ONES
TENS: tuple[str, ...] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)

HUNDRED = "hundred"


def _below_hundred(n: int) -> list[str]:
    if n < 20:
        return [ONES[n]]
    tens, ones = divmod(n, 10)
    return [TENS[tens], ONES[ones]] if ones else [TENS[tens]]


def number_to_words(n: int) -> str:
    if not NUMBER_WORDS_MIN <= n <= NUMBER_WORDS_MAX:
        raise DomainRangeError(
            f"number_to_words supports {NUMBER_WORDS_MIN}-{NUMBER_WORDS_MAX}, got {n}",
            value=n, lower=NUMBER_WORDS_MIN, upper=NUMBER_WORDS_MAX,
            exercise="number_to_words",
        )
    if n == 0:
        return ONES[0]

    hundreds, rest = divmod(n, 100)
    words: list[str] = []
    if hundreds:
        words += [ONES[hundreds], HUNDRED]
    if rest:
        words += _below_hundred(rest)
    return " ".join(words)
