"""Pytest configuration for all tests."""

import os
from typing import AsyncGenerator

os.environ.setdefault("STOREFRONT_ENVIRONMENT", "testing")
os.environ.setdefault("STOREFRONT_SECRET_KEY", "test-secret-key-for-storefront-tests")
os.environ.setdefault("STOREFRONT_EMAIL", "tienda@example.com")
os.environ.setdefault("STOREFRONT_EMAIL_PASSWORD", "app-password")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.core.config import Settings, get_settings
from storefront.infrastructure.auth.jwt_service import JWTService


@pytest.fixture
def settings() -> Settings:
    """Process settings as loaded from the test environment."""
    return get_settings()


@pytest.fixture
def jwt_service(settings: Settings) -> JWTService:
    return JWTService(settings)


@pytest.fixture
def sample_user() -> dict:
    return {
        "_id": "65f1c0ffee0000000000abcd",
        "first_name": "Ana",
        "last_name": "García",
        "email": "ana@example.com",
        "role": "user",
    }


@pytest.fixture
def user_token(jwt_service: JWTService, sample_user: dict) -> str:
    return jwt_service.generate_token(sample_user)


@pytest_asyncio.fixture
async def client(tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a fresh application with uploads in tmp_path."""
    from storefront.infrastructure.api.app import create_app
    from storefront.infrastructure.api.routes.uploads_router import get_request_uploader
    from storefront.infrastructure.storage import DiskStorage, Uploader

    app = create_app()
    app.dependency_overrides[get_request_uploader] = lambda: Uploader(DiskStorage(tmp_path))

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
