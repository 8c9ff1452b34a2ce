# tests/conftest.py
"""Global PyTest fixtures for the test-suite."""

from __future__ import annotations

import numpy as np
import pytest

from tests.helpers import seeded_engine


@pytest.fixture
def engine() -> np.random.Generator:
    """Engine seeded with ``DEFAULT_SEED``, fresh for every test."""
    return seeded_engine()
