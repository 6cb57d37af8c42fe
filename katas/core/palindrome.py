"""Palindrome Checker: compares a normalized string to its reverse.

Invariants:
    - normalize() keeps only letters and digits, lower-cased
    - normalize() is idempotent: normalize(normalize(s)) == normalize(s)
    - "" and any single character are palindromes
"""


def normalize(text: str) -> str:
    """Reduce text to lower-case alphanumeric characters."""
    return "".join(ch.lower() for ch in text if ch.isalnum())


def is_palindrome(text: str) -> bool:
    normalized = normalize(text)
    return normalized == normalized[::-1]
