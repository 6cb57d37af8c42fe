"""Exercise Input Schemas: tests for strict typing and extra-field rejection."""

import pytest
from pydantic import ValidationError

from katas.core.domain_types import CalculatorOperation
from katas.schemas.exercises import (
    CalculatorInput, FizzBuzzInput, FromRomanInput, PasswordInput,
    TextAnalysisInput,
)


def test_fizzbuzz_input_accepts_int():
    assert FizzBuzzInput.model_validate({"n": 15}).n == 15


@pytest.mark.parametrize("value", ["15", 1.5, None])
def test_fizzbuzz_input_rejects_non_int(value):
    with pytest.raises(ValidationError):
        FizzBuzzInput.model_validate({"n": value})


def test_extra_fields_rejected():
    with pytest.raises(ValidationError):
        PasswordInput.model_validate({"password": "x", "username": "bob"})


def test_calculator_input_coerces_operation_enum():
    payload = CalculatorInput.model_validate({"operation": "add", "a": 1, "b": 2.5})
    assert payload.operation is CalculatorOperation.ADD
    assert payload.a == 1
    assert payload.b == 2.5


def test_calculator_input_rejects_unknown_operation():
    with pytest.raises(ValidationError):
        CalculatorInput.model_validate({"operation": "pow", "a": 1, "b": 2})


def test_calculator_input_rejects_numeric_strings():
    with pytest.raises(ValidationError):
        CalculatorInput.model_validate({"operation": "add", "a": "1", "b": 2})


def test_optional_flags_default_to_none():
    assert TextAnalysisInput.model_validate({"text": "hi"}).strip_punctuation is None
    assert FromRomanInput.model_validate({"numeral": "X"}).strict is None
