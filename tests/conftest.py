"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from helpers import Boom


@pytest.fixture
def boom() -> Boom:
    return Boom("boom")


@pytest.fixture
def other_boom() -> Boom:
    return Boom("other")
