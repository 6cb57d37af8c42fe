"""FizzBuzz: the first kata of every TDD workshop.

Invariants:
    - len(fizzbuzz(n)) == n for every n >= 0
    - Index i (1-based) holds "Fizz" iff 3 | i and "Buzz" iff 5 | i
    - n == 0 yields []; negative n raises DomainRangeError
"""

from katas.core.errors import DomainRangeError


def fizzbuzz_term(i: int) -> str:
    """Single FizzBuzz term for a positive index."""
    word = ""
    if i % 3 == 0:
        word += "Fizz"
    if i % 5 == 0:
        word += "Buzz"
    return word or str(i)


def fizzbuzz(n: int) -> list[str]:
    if n < 0:
        raise DomainRangeError(
            f"FizzBuzz count must be non-negative, got {n}",
            value=n, lower=0, exercise="fizzbuzz",
        )
    return [fizzbuzz_term(i) for i in range(1, n + 1)]
