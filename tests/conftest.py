"""Shared fixtures for all tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls

from clipsync_smoke.client import Services
from clipsync_smoke.config import SuiteConfig

API_BASE_URL = "http://api.test"
DOWNLOAD_BASE_URL = "http://download.test"


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Intercept every aiohttp request made during the test."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def config() -> SuiteConfig:
    """Create test configuration."""
    return SuiteConfig(
        api_base_url=API_BASE_URL,
        download_base_url=DOWNLOAD_BASE_URL,
    )


@pytest.fixture
async def services(
    config: SuiteConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[Services, None]:
    """Create clients for both services with managed sessions."""
    async with Services.from_config(config) as impl:
        yield impl
