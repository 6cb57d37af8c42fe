"""Root conftest: shared test configuration.

Invariants:
    - No KATAS_ environment variable leaks into a test
    - get_settings() cache is cleared around every test
"""

import os

import pytest

from katas.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("KATAS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
