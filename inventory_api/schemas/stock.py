"""
Schemas for stock-related API endpoints.
"""

from typing import Optional
from pydantic import Field
from datetime import datetime

from inventory_api.core.enums import MovementType, StockStatus
from inventory_api.schemas.base import BaseSchema


class StockCreate(BaseSchema):
    product_id: int
    initial_quantity: int = 0


class StockUpdate(BaseSchema):
    """Body shared by every movement endpoint"""
    quantity: int = Field(..., gt=0)
    reason: Optional[str] = None


class StockRead(BaseSchema):
    """Stock view with its derived status. Built fresh on every read."""
    product_id: int
    quantity: int
    last_updated: datetime
    status: StockStatus


class StockMovementRead(BaseSchema):
    type: MovementType
    quantity: int
    reason: str
    timestamp: datetime
    previous_quantity: int
    new_quantity: int
