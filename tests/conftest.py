"""
Shared fixtures for the Products API tests.

Every test gets its own seeded ``ProductStore`` and its own application
built around it, so mutations never leak between tests.
"""

from typing import Dict, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.store import ProductStore, init_store
from product_catalog_api.app.main import create_app


TEST_API_KEY = "test-api-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=TEST_API_KEY)


@pytest.fixture
def store() -> ProductStore:
    """Store preloaded with the six seed products."""
    return init_store()


@pytest.fixture
def app(settings: Settings, store: ProductStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def valid_payload() -> Dict[str, object]:
    return {
        "name": "Mechanical Keyboard",
        "description": "Hot-swappable mechanical keyboard with RGB lighting",
        "price": 89.5,
        "category": "Electronics",
    }
