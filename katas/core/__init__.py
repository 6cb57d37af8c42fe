"""Core Layer: pure exercise logic, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic
    - Exercises are leaves: no exercise module imports another
"""
