"""Simple Calculator: four binary operations over ints and floats.

Invariants:
    - Results are plain Python arithmetic (true division for divide)
    - divide(a, 0) raises DivisionByZeroError, never returns a sentinel
    - An OverflowError from int/float conversion surfaces as ArithmeticOverflowError
    - add and multiply are commutative

Design Decisions:
    - Module-level functions are the primary API; Calculator groups them
      behind one object for callers that dispatch by operation name
"""

from functools import wraps
from typing import Callable

from katas.core.domain_types import CalculatorOperation
from katas.core.errors import ArithmeticOverflowError, DivisionByZeroError

Number = int | float


def _guard_overflow(func: Callable[[Number, Number], Number]):
    """Re-raise OverflowError as ArithmeticOverflowError."""
    @wraps(func)
    def wrapper(a: Number, b: Number) -> Number:
        try:
            return func(a, b)
        except OverflowError as exc:
            raise ArithmeticOverflowError(func.__name__, str(exc)) from exc
    return wrapper


@_guard_overflow
def add(a: Number, b: Number) -> Number:
    return a + b


@_guard_overflow
def subtract(a: Number, b: Number) -> Number:
    return a - b


@_guard_overflow
def multiply(a: Number, b: Number) -> Number:
    return a * b


@_guard_overflow
def divide(a: Number, b: Number) -> float:
    """True division. Raises DivisionByZeroError when b is zero (0 or 0.0)."""
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


_OPERATIONS: dict[CalculatorOperation, Callable[[Number, Number], Number]] = {
    CalculatorOperation.ADD: add,
    CalculatorOperation.SUBTRACT: subtract,
    CalculatorOperation.MULTIPLY: multiply,
    CalculatorOperation.DIVIDE: divide,
}


class Calculator:
    """Stateless calculator. Every method delegates to the module functions."""

    def add(self, a: Number, b: Number) -> Number:
        return add(a, b)

    def subtract(self, a: Number, b: Number) -> Number:
        return subtract(a, b)

    def multiply(self, a: Number, b: Number) -> Number:
        return multiply(a, b)

    def divide(self, a: Number, b: Number) -> float:
        return divide(a, b)

    def apply(
        self, operation: CalculatorOperation | str, a: Number, b: Number,
    ) -> Number:
        """Apply an operation by enum member or its string value."""
        return _OPERATIONS[CalculatorOperation(operation)](a, b)
