# inventory_api/models/product.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from inventory_api.core.exceptions import ValidationError
from inventory_api.core.utils import utc_now


@dataclass
class Product:
    """A catalog entry. Owned by ProductService; mutated in place."""
    id: int
    name: str
    description: str
    price: float
    category: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    is_active: bool = True

    def __post_init__(self):
        # A new product has not been modified yet
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update_price(self, new_price: float) -> None:
        """Shared price-change rule: negative prices are rejected."""
        if new_price < 0:
            raise ValidationError("Price cannot be negative")
        self.price = new_price
        self.updated_at = utc_now()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = utc_now()

    def activate(self) -> None:
        self.is_active = True
        self.updated_at = utc_now()
