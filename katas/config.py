"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by a KATAS_-prefixed environment variable
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults reproduce the classic kata behaviour exactly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Core never imports this module; password_policy() hands core a plain PasswordPolicy
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from katas.core.domain_types import BASE_CRITERIA
from katas.core.password_validator import (
    DEFAULT_SPECIAL_CHARACTERS, PasswordPolicy,
)


class Settings(BaseSettings):
    """Kata settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KATAS_", env_file=".env", case_sensitive=False,
    )

    # Password validator
    password_min_length: int = 8
    password_special_characters: str = DEFAULT_SPECIAL_CHARACTERS
    password_strong_min_passed: int = 5
    password_medium_min_passed: int = 3
    password_detect_weak_patterns: bool = False

    # Roman numerals
    roman_strict: bool = False

    # Text analysis
    text_strip_punctuation: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("password_min_length")
    @classmethod
    def min_length_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("password_min_length must be at least 1")
        return v

    @field_validator("password_special_characters")
    @classmethod
    def special_characters_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password_special_characters must not be empty")
        return v

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @model_validator(mode="after")
    def thresholds_ordered(self) -> "Settings":
        criteria = len(BASE_CRITERIA)
        if not (
            0 <= self.password_medium_min_passed
            <= self.password_strong_min_passed <= criteria
        ):
            raise ValueError(
                "password thresholds must satisfy 0 <= password_medium_min_passed "
                f"<= password_strong_min_passed <= {criteria}"
            )
        return self

    def password_policy(self) -> PasswordPolicy:
        return PasswordPolicy(
            min_length=self.password_min_length,
            special_characters=self.password_special_characters,
            strong_min_passed=self.password_strong_min_passed,
            medium_min_passed=self.password_medium_min_passed,
            detect_weak_patterns=self.password_detect_weak_patterns,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
