# ABOUTME: Shared test fixtures for the weather metrics test suite.
# ABOUTME: Provides a fixed clock and service settings used by engine and web tests.

from datetime import datetime, timezone

import pytest

from src.config import Settings


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(location="Test Station")
