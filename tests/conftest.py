"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import copy
import os
from typing import Any

import pytest
from hypothesis import Verbosity, settings

from tests.stubs import ADDRESS_RESPONSE, ERROR_RESPONSE, FakeClock

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def address_response() -> dict[str, Any]:
    return copy.deepcopy(ADDRESS_RESPONSE)


@pytest.fixture
def error_response() -> dict[str, Any]:
    return copy.deepcopy(ERROR_RESPONSE)
