"""Settings: tests for defaults, environment overrides and validation.

Tests cover:
    - Defaults reproduce the classic kata policy
    - KATAS_-prefixed environment variables override fields
    - Invalid special-character sets, log formats and thresholds are rejected
    - get_settings() is cached
    - password_policy() builds a matching PasswordPolicy
"""

import pytest
from pydantic import ValidationError

from katas.config import Settings, get_settings
from katas.core.password_validator import PasswordPolicy


def test_defaults():
    settings = Settings()
    assert settings.password_min_length == 8
    assert settings.password_special_characters == "!@#$%^&*"
    assert settings.password_strong_min_passed == 5
    assert settings.password_medium_min_passed == 3
    assert settings.password_detect_weak_patterns is False
    assert settings.roman_strict is False
    assert settings.text_strip_punctuation is False
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("KATAS_PASSWORD_MIN_LENGTH", "12")
    monkeypatch.setenv("KATAS_ROMAN_STRICT", "true")
    monkeypatch.setenv("KATAS_LOG_FORMAT", "TEXT")
    settings = Settings()
    assert settings.password_min_length == 12
    assert settings.roman_strict is True
    assert settings.log_format == "text"


def test_empty_special_characters_rejected():
    with pytest.raises(ValidationError):
        Settings(password_special_characters="")


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_thresholds_must_be_ordered():
    with pytest.raises(ValidationError):
        Settings(password_medium_min_passed=5, password_strong_min_passed=4)


@pytest.mark.parametrize("kwargs", [
    {"password_strong_min_passed": 6},
    {"password_medium_min_passed": -1},
    {"password_min_length": 0},
])
def test_out_of_bounds_password_settings_rejected(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_out_of_bounds_env_fails_on_load(monkeypatch):
    monkeypatch.setenv("KATAS_PASSWORD_STRONG_MIN_PASSED", "6")
    with pytest.raises(ValidationError):
        get_settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_password_policy_from_settings():
    settings = Settings(
        password_min_length=10,
        password_special_characters="?",
        password_detect_weak_patterns=True,
    )
    assert settings.password_policy() == PasswordPolicy(
        min_length=10, special_characters="?", detect_weak_patterns=True,
    )
