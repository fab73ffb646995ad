"""
Pytest configuration for the city density report.

Provides small CSV tables shared across unit tests and resets the cached
settings so environment overrides made by a test do not leak.
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from city_density.config import get_settings

HEADER = "city,population,area,density,country"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def single_city_csv() -> str:
    return f"{HEADER}\nTestville,1000,10,100,Testland"


@pytest.fixture
def two_city_csv() -> str:
    return f"{HEADER}\nHalfton,500,10,50,Testland\nFullton,1000,10,100,Testland"


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
