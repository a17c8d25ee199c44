"""Shared fixtures for skelgen tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest import mock

import pytest


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Run every test without skelgen settings from the outer environment."""
    with mock.patch.dict(os.environ):
        for key in ("SKELGEN_SOURCE_EXTENSION", "SKELGEN_PROJECT_DIR"):
            os.environ.pop(key, None)
        yield
