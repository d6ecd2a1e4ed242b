# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from inventory_api.core.config import Settings
from inventory_api.main import create_app
from inventory_api.services.product_service import ProductService
from inventory_api.services.stock_service import StockService


@pytest.fixture
def settings():
    """Provide test settings"""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
        DEFAULT_MIN_THRESHOLD=10,
        STOCK_CONFLICT_STATUS_CODE=409,
    )

@pytest.fixture
def product_service():
    """A fresh, empty catalog for each test"""
    return ProductService()

@pytest.fixture
def stock_service():
    """A fresh, empty stock ledger for each test"""
    return StockService()

@pytest.fixture
def app(settings):
    """A new application per test, so stores never leak state between tests"""
    return create_app(settings)

@pytest.fixture
def test_client(app):
    """Provide a test client bound to a fresh application"""
    with TestClient(app) as client:
        yield client

@pytest.fixture
def sample_product_data():
    """Provide sample product data for tests"""
    return {
        "name": "Widget",
        "description": "A test widget",
        "price": 9.99,
        "category": "tools",
    }
