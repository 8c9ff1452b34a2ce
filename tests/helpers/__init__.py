"""Shared test utilities for the randvar test-suite.

Usage:
    >>> from tests.helpers import expect_success, RecordingDistribution
    >>> dist = expect_success(default_distribution(int))
"""

from __future__ import annotations

from tests.helpers.constants import (
    DEFAULT_SEED,
    N_DRAWS,
    PRINTABLE_HIGH,
    PRINTABLE_LOW,
)
from tests.helpers.result_utils import expect_failure, expect_success
from tests.helpers.stubs import RecordingDistribution, seeded_engine

__all__ = [
    "DEFAULT_SEED",
    "N_DRAWS",
    "PRINTABLE_HIGH",
    "PRINTABLE_LOW",
    "RecordingDistribution",
    "expect_failure",
    "expect_success",
    "seeded_engine",
]
