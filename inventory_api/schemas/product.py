"""
Schemas for product-related API endpoints.
"""

from typing import Optional, List
from pydantic import Field, field_validator
from datetime import datetime

from inventory_api.schemas.base import BaseSchema


class ProductBase(BaseSchema):
    """Base model for product data common to all operations"""
    name: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., max_length=500)
    price: float = Field(..., gt=0)
    category: str


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class ProductUpdate(BaseSchema):
    """Schema for partial updates; only the fields sent are applied"""
    name: Optional[str] = Field(None, min_length=3)
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, gt=0)
    category: Optional[str] = None

    @field_validator('name', 'description', 'price', 'category')
    @classmethod
    def reject_explicit_null(cls, v, info):
        # Omitted fields keep their value; an explicit null is a bad request
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ProductRead(BaseSchema):
    """Schema for reading product data"""
    id: int
    name: str
    description: str
    price: float
    category: str
    created_at: datetime
    updated_at: datetime
    is_active: bool


class ProductStatusChange(BaseSchema):
    """Response of the activate/deactivate endpoints"""
    message: str
    product: ProductRead


class ProductStatistics(BaseSchema):
    total_products: int
    active_products: int
    inactive_products: int
    average_price: float
    categories: List[str]
