"""Leap Year: the Gregorian rule as a pure predicate.

Invariants:
    - leap <=> divisible by 4 and (not by 100, or by 400)
    - Applied to every integer (proleptic calendar, astronomical numbering:
      year 0 is leap, -4 is leap, -100 is not)
"""

from katas.core.domain_types import YearNumber


def is_leap_year(year: YearNumber | int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
