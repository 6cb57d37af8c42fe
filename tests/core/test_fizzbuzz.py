"""FizzBuzz: tests for sequence length, term mapping and edge counts.

Tests cover:
    - fizzbuzz(15) full sequence
    - Output length equals n
    - Fizz/Buzz presence tracks divisibility by 3 and 5
    - n == 0 yields [], negative n raises DomainRangeError
"""

import pytest

from katas.core.errors import DomainRangeError
from katas.core.fizzbuzz import fizzbuzz, fizzbuzz_term


def test_fizzbuzz_15():
    assert fizzbuzz(15) == [
        "1", "2", "Fizz", "4", "Buzz", "Fizz", "7", "8", "Fizz", "Buzz",
        "11", "Fizz", "13", "14", "FizzBuzz",
    ]


def test_fizzbuzz_length_matches_n():
    for n in (1, 2, 3, 10, 100):
        assert len(fizzbuzz(n)) == n


def test_fizz_and_buzz_track_divisibility():
    for i, term in enumerate(fizzbuzz(300), start=1):
        assert ("Fizz" in term) == (i % 3 == 0)
        assert ("Buzz" in term) == (i % 5 == 0)


def test_plain_numbers_are_decimal_strings():
    assert fizzbuzz_term(7) == "7"
    assert fizzbuzz_term(98) == "98"


def test_fizzbuzz_term_for_multiple_of_fifteen():
    assert fizzbuzz_term(45) == "FizzBuzz"


def test_fizzbuzz_zero_is_empty():
    assert fizzbuzz(0) == []


def test_fizzbuzz_negative_raises():
    with pytest.raises(DomainRangeError) as exc_info:
        fizzbuzz(-1)
    assert exc_info.value.value == -1
    assert exc_info.value.lower == 0


def test_negative_count_is_a_value_error():
    with pytest.raises(ValueError):
        fizzbuzz(-10)
