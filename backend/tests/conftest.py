"""
AreaWatch Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every HTTP client fixture builds its own app with create_app(), so
       each test gets fresh, freshly seeded collections.

Fixture Inventory:
    ├── split_settings / combined_settings: Settings for the two location formats
    ├── test_client: HTTPX AsyncClient, split format (the default service)
    ├── combined_client: HTTPX AsyncClient, combined location format
    ├── zero_id_client: combined format with GET /areas/0 listing all areas
    └── no_patch_client: split format without PATCH /users/{id}
"""

import os

# Quiet logs before the application package reads its settings
os.environ["LOG_LEVEL"] = "WARNING"

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from areawatch.config import LocationFormat, Settings
from areawatch.main import create_app


@asynccontextmanager
async def _client_for(app_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=create_app(app_settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def split_settings() -> Settings:
    return Settings(location_format=LocationFormat.SPLIT)


@pytest.fixture
def combined_settings() -> Settings:
    return Settings(location_format=LocationFormat.COMBINED)


@pytest_asyncio.fixture
async def test_client(split_settings):
    """
    HTTPX AsyncClient talking to a fresh split-format app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    async with _client_for(split_settings) as client:
        yield client


@pytest_asyncio.fixture
async def combined_client(combined_settings):
    async with _client_for(combined_settings) as client:
        yield client


@pytest_asyncio.fixture
async def zero_id_client():
    app_settings = Settings(location_format=LocationFormat.COMBINED, area_zero_id_lists_all=True)
    async with _client_for(app_settings) as client:
        yield client


@pytest_asyncio.fixture
async def no_patch_client():
    app_settings = Settings(location_format=LocationFormat.SPLIT, enable_location_patch=False)
    async with _client_for(app_settings) as client:
        yield client
