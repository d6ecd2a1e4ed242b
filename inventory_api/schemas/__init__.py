"""
Schema exports for the application.
"""

# Base schemas
from .base import BaseSchema, MessageResponse

# Product schemas
from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductRead,
    ProductStatistics,
    ProductStatusChange
)

# Stock schemas
from .stock import (
    StockCreate,
    StockUpdate,
    StockRead,
    StockMovementRead
)
