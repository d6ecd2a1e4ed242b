from fastapi import Request

from inventory_api.core.config import Settings
from inventory_api.services.product_service import ProductService
from inventory_api.services.stock_service import StockService


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_product_service(request: Request) -> ProductService:
    """Dependency returning the catalog built once in create_app()."""
    return request.app.state.product_service


def get_stock_service(request: Request) -> StockService:
    """Dependency returning the stock ledger built once in create_app()."""
    return request.app.state.stock_service
