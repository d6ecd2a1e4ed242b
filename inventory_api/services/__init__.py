from .product_service import ProductService
from .stock_service import StockService
