"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from locatorgen.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop LOCATORGEN_* variables and the cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("LOCATORGEN_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
