"""Exercise Dispatch: explicit routing from exercise name to core function.

Invariants:
    - Every name->handler mapping is visible in one dict, no getattr magic
    - execute() never raises for bad input: unknown names, schema violations and
      KataErrors all come back as {"status": "error", "error_code": ...}
    - Every call is logged with the exercise name and outcome
    - Password contents never reach the log

Design Decisions:
    - Settings resolved once per dispatcher: password policy, Roman strict mode and
      punctuation stripping are fixed for its lifetime
    - Per-call flags (strict, strip_punctuation) override settings when given
"""

import logging
import time
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from katas.config import Settings, get_settings
from katas.core.calculator import Calculator
from katas.core.errors import KataError, UnknownExerciseError
from katas.core.fizzbuzz import fizzbuzz
from katas.core.leap_year import is_leap_year
from katas.core.number_words import number_to_words
from katas.core.palindrome import is_palindrome
from katas.core.password_validator import PasswordValidator
from katas.core.roman_numerals import from_roman, to_roman
from katas.core.text_analysis import analyze_text
from katas.schemas.exercises import (
    CalculatorInput, FizzBuzzInput, FromRomanInput, LeapYearInput,
    NumberToWordsInput, PalindromeInput, PasswordInput, TextAnalysisInput,
    ToRomanInput,
)

logger = logging.getLogger(__name__)

_Handler = Callable[[Any], dict]


class ExerciseDispatch:
    """Routes exercise name -> (input schema, handler). Explicit registration."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._calculator = Calculator()
        self._password_validator = PasswordValidator(
            self._settings.password_policy(),
        )

        # every mapping explicit: adding an exercise requires editing this dict
        self._handlers: dict[str, tuple[type[BaseModel], _Handler]] = {
            "fizzbuzz": (FizzBuzzInput, self._fizzbuzz),
            "palindrome": (PalindromeInput, self._palindrome),
            "calculator": (CalculatorInput, self._calculator_op),
            "text_analysis": (TextAnalysisInput, self._text_analysis),
            "leap_year": (LeapYearInput, self._leap_year),
            "number_to_words": (NumberToWordsInput, self._number_to_words),
            "to_roman": (ToRomanInput, self._to_roman),
            "from_roman": (FromRomanInput, self._from_roman),
            "password": (PasswordInput, self._password),
        }

    @property
    def exercise_names(self) -> list[str]:
        return list(self._handlers)

    def execute(self, name: str, input_data: dict) -> dict:
        """Validate input_data, run the exercise, return a result dict."""
        started = time.perf_counter()
        entry = self._handlers.get(name)
        if entry is None:
            result = _error_result(UnknownExerciseError(name))
            self._log_call(name, result, started)
            return result

        schema, handler = entry
        try:
            payload = schema.model_validate(input_data)
            result = {"status": "ok", **handler(payload)}
        except ValidationError as exc:
            result = _validation_error_result(exc)
        except KataError as exc:
            result = _error_result(exc)
        self._log_call(name, result, started)
        return result

    # ─── Handlers ────────────────────────────────────────────────

    def _fizzbuzz(self, payload: FizzBuzzInput) -> dict:
        return {"sequence": fizzbuzz(payload.n)}

    def _palindrome(self, payload: PalindromeInput) -> dict:
        return {"is_palindrome": is_palindrome(payload.text)}

    def _calculator_op(self, payload: CalculatorInput) -> dict:
        value = self._calculator.apply(payload.operation, payload.a, payload.b)
        return {"operation": payload.operation.value, "result": value}

    def _text_analysis(self, payload: TextAnalysisInput) -> dict:
        strip = payload.strip_punctuation
        if strip is None:
            strip = self._settings.text_strip_punctuation
        return analyze_text(payload.text, strip_punctuation=strip).to_dict()

    def _leap_year(self, payload: LeapYearInput) -> dict:
        return {"year": payload.year, "is_leap_year": is_leap_year(payload.year)}

    def _number_to_words(self, payload: NumberToWordsInput) -> dict:
        return {"words": number_to_words(payload.n)}

    def _to_roman(self, payload: ToRomanInput) -> dict:
        return {"numeral": to_roman(payload.n)}

    def _from_roman(self, payload: FromRomanInput) -> dict:
        strict = payload.strict
        if strict is None:
            strict = self._settings.roman_strict
        return {"value": from_roman(payload.numeral, strict=strict)}

    def _password(self, payload: PasswordInput) -> dict:
        return self._password_validator.validate(payload.password).to_dict()

    # ─── Logging ─────────────────────────────────────────────────

    def _log_call(self, name: str, result: dict, started: float) -> None:
        extra = {
            "exercise": name,
            "status": result["status"],
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
        }
        if result["status"] == "error":
            extra["error_code"] = result["error_code"]
            logger.warning(
                f"Exercise {name} failed: {result['error_code']}", extra=extra,
            )
        else:
            logger.debug(f"Exercise {name} ok", extra=extra)


def _error_result(exc: KataError) -> dict:
    envelope = exc.to_response()["error"]
    return {
        "status": "error",
        "error_code": envelope["code"],
        "message": envelope["message"],
        "category": envelope["category"],
        "severity": envelope["severity"],
    }


def _validation_error_result(exc: ValidationError) -> dict:
    return {
        "status": "error",
        "error_code": "VALIDATION_ERROR",
        "message": "Invalid exercise input",
        "category": "validation",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
