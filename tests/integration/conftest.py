"""Fixtures for integration tests against a mocked deployment."""

from collections.abc import AsyncGenerator

import pytest
from aioresponses import aioresponses as aioresponses_cls

from site_smoke.config import SuiteConfig
from site_smoke.runner import TestRunner
from site_smoke.testing.payloads import API_BASE_URL, WEBSITE_URL
from site_smoke.testing.site import MockSiteFn, mock_healthy_site


@pytest.fixture
def config() -> SuiteConfig:
    """Create test configuration."""
    return SuiteConfig(api_base_url=API_BASE_URL, website_url=WEBSITE_URL)


@pytest.fixture
async def runner(
    config: SuiteConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[TestRunner, None]:
    """Create runner with managed session."""
    async with TestRunner.from_config(config) as impl:
        yield impl


@pytest.fixture
def mock_site(aioresponses: aioresponses_cls) -> MockSiteFn:
    """Return a function registering a healthy website and API."""

    def _mock(*, skip: tuple[str, ...] = ()) -> None:
        mock_healthy_site(aioresponses, skip=skip)

    return _mock
