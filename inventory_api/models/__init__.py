from .product import Product
from .stock import Stock, StockMovement
