"""Password Validator: ordered rule engine producing a ValidationResult.

Invariants:
    - Base criteria run in PasswordCriterion order; each failure appends exactly one
      tag and one suggestion, so failed_criteria and suggestions pair up by index
    - is_valid <=> failed_criteria is empty
    - Strength depends on how many of the 5 base criteria pass:
      >= strong_min_passed -> strong, >= medium_min_passed -> medium, else weak
    - Weak-pattern checks run only when policy.detect_weak_patterns is set;
      any weak-pattern failure caps strength at medium
    - validate_password never raises for a str input: failure is a normal result

Design Decisions:
    - Criteria as an explicit list of (tag, predicate, suggestion) rows: the
      checklist order is visible in one place
    - Policy is a frozen dataclass: settings build it, core never reads settings
"""

from dataclasses import dataclass, field
from typing import Callable

from katas.core.domain_types import (
    BASE_CRITERIA, PasswordCriterion, PasswordStrength,
)

DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*"

COMMON_PASSWORDS: frozenset[str] = frozenset({
    "password", "password1", "password123", "123456", "12345678",
    "123456789", "qwerty", "qwerty123", "letmein", "welcome", "admin",
    "admin123", "changeme", "iloveyou", "monkey", "dragon", "abc123",
})

SEQUENCE_LENGTH = 3
REPEAT_LENGTH = 3


@dataclass(frozen=True)
class PasswordPolicy:
    """Tunable knobs of the validator. Defaults match the classic kata."""
    min_length: int = 8
    special_characters: str = DEFAULT_SPECIAL_CHARACTERS
    strong_min_passed: int = len(BASE_CRITERIA)
    medium_min_passed: int = 3
    detect_weak_patterns: bool = False

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        if not self.special_characters:
            raise ValueError("special_characters must not be empty")
        if not 0 <= self.medium_min_passed <= self.strong_min_passed <= len(BASE_CRITERIA):
            raise ValueError(
                "thresholds must satisfy 0 <= medium_min_passed "
                f"<= strong_min_passed <= {len(BASE_CRITERIA)}"
            )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call."""
    is_valid: bool
    failed_criteria: tuple[PasswordCriterion, ...] = field(default_factory=tuple)
    suggestions: tuple[str, ...] = field(default_factory=tuple)
    strength: PasswordStrength = PasswordStrength.WEAK

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "failed_criteria": [c.value for c in self.failed_criteria],
            "suggestions": list(self.suggestions),
            "strength": self.strength.value,
        }


_Rule = tuple[PasswordCriterion, Callable[[str, PasswordPolicy], bool], str]


def _base_rules(policy: PasswordPolicy) -> list[_Rule]:
    """(tag, passes?, suggestion) rows in checklist order."""
    return [
        (
            PasswordCriterion.TOO_SHORT,
            lambda pw, p: len(pw) >= p.min_length,
            f"Use at least {policy.min_length} characters",
        ),
        (
            PasswordCriterion.NO_UPPERCASE,
            lambda pw, p: any(ch.isupper() for ch in pw),
            "Add at least one uppercase letter",
        ),
        (
            PasswordCriterion.NO_LOWERCASE,
            lambda pw, p: any(ch.islower() for ch in pw),
            "Add at least one lowercase letter",
        ),
        (
            PasswordCriterion.NO_DIGIT,
            lambda pw, p: any(ch.isdigit() for ch in pw),
            "Add at least one digit",
        ),
        (
            PasswordCriterion.NO_SPECIAL_CHAR,
            lambda pw, p: any(ch in p.special_characters for ch in pw),
            f"Add at least one special character ({policy.special_characters})",
        ),
    ]


# ─── Weak-pattern extension ──────────────────────────────────────

def has_sequential_chars(password: str, length: int = SEQUENCE_LENGTH) -> bool:
    """True if `length` consecutive ascending letters or digits appear ("abc", "123")."""
    run = 1
    for prev, cur in zip(password, password[1:]):
        same_class = (prev.isdigit() and cur.isdigit()) or (
            prev.isalpha() and cur.isalpha()
        )
        if same_class and ord(cur.lower()) - ord(prev.lower()) == 1:
            run += 1
            if run >= length:
                return True
        else:
            run = 1
    return False


def has_repeated_chars(password: str, length: int = REPEAT_LENGTH) -> bool:
    """True if one character appears `length` times in a row ("aaa")."""
    run = 1
    for prev, cur in zip(password, password[1:]):
        run = run + 1 if cur == prev else 1
        if run >= length:
            return True
    return False


def _weak_pattern_rules() -> list[_Rule]:
    return [
        (
            PasswordCriterion.COMMON_PASSWORD,
            lambda pw, p: pw.lower() not in COMMON_PASSWORDS,
            "Avoid common passwords",
        ),
        (
            PasswordCriterion.SEQUENTIAL_CHARS,
            lambda pw, p: not has_sequential_chars(pw),
            "Avoid sequences such as 'abc' or '123'",
        ),
        (
            PasswordCriterion.REPEATED_CHARS,
            lambda pw, p: not has_repeated_chars(pw),
            "Avoid repeating the same character three times in a row",
        ),
    ]


# ─── Strength ────────────────────────────────────────────────────

def classify_strength(passed: int, policy: PasswordPolicy) -> PasswordStrength:
    """Map the number of passed base criteria to a strength band."""
    if passed >= policy.strong_min_passed:
        return PasswordStrength.STRONG
    if passed >= policy.medium_min_passed:
        return PasswordStrength.MEDIUM
    return PasswordStrength.WEAK


def validate_password(
    password: str, policy: PasswordPolicy | None = None,
) -> ValidationResult:
    policy = policy or PasswordPolicy()
    failed: list[PasswordCriterion] = []
    suggestions: list[str] = []

    for tag, passes, suggestion in _base_rules(policy):
        if not passes(password, policy):
            failed.append(tag)
            suggestions.append(suggestion)

    strength = classify_strength(len(BASE_CRITERIA) - len(failed), policy)

    if policy.detect_weak_patterns:
        weak_found = False
        for tag, passes, suggestion in _weak_pattern_rules():
            if not passes(password, policy):
                failed.append(tag)
                suggestions.append(suggestion)
                weak_found = True
        if weak_found and strength is PasswordStrength.STRONG:
            strength = PasswordStrength.MEDIUM

    return ValidationResult(
        is_valid=not failed,
        failed_criteria=tuple(failed),
        suggestions=tuple(suggestions),
        strength=strength,
    )


class PasswordValidator:
    """Validator bound to one policy."""

    def __init__(self, policy: PasswordPolicy | None = None):
        self.policy = policy or PasswordPolicy()

    def validate(self, password: str) -> ValidationResult:
        return validate_password(password, self.policy)
