"""Infrastructure Layer: logging setup.

Invariants:
    - Nothing in core/ imports from infrastructure/
"""
