"""Shared fixtures."""

from collections.abc import Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock every request made through aiohttp."""
    with aioresponses_cls() as mocked:
        yield mocked
