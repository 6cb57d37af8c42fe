"""Exercise Input Schemas: pydantic models validating dispatch payloads.

Invariants:
    - One model per dispatchable exercise
    - Unknown fields are rejected (extra="forbid")
    - Strict scalar types: "5" is not an int, True is not a number

Design Decisions:
    - Range checks stay in core (DomainRangeError); schemas only check shape and type,
      so the same error surfaces whether core is called directly or via dispatch
"""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

from katas.core.domain_types import CalculatorOperation


class _ExerciseInput(BaseModel):
    model_config = ConfigDict(extra="forbid")


class FizzBuzzInput(_ExerciseInput):
    n: StrictInt


class PalindromeInput(_ExerciseInput):
    text: StrictStr


class CalculatorInput(_ExerciseInput):
    operation: CalculatorOperation
    a: StrictInt | StrictFloat
    b: StrictInt | StrictFloat


class TextAnalysisInput(_ExerciseInput):
    text: StrictStr
    strip_punctuation: StrictBool | None = None


class LeapYearInput(_ExerciseInput):
    year: StrictInt


class NumberToWordsInput(_ExerciseInput):
    n: StrictInt


class ToRomanInput(_ExerciseInput):
    n: StrictInt


class FromRomanInput(_ExerciseInput):
    numeral: StrictStr
    strict: StrictBool | None = None


class PasswordInput(_ExerciseInput):
    password: StrictStr
