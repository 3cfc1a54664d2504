"""Shared test fixtures for the lazydiff test suite.

Item and store helpers live in ``diffitems.py`` next to this file; pytest
puts this directory on ``sys.path`` when it loads the conftest.
"""

from __future__ import annotations

import pytest

from lazydiff.config import LazyDiffConfig


@pytest.fixture
def config() -> LazyDiffConfig:
    """Default planner configuration."""
    return LazyDiffConfig()
