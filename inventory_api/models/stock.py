# inventory_api/models/stock.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from inventory_api.core.enums import MovementType
from inventory_api.core.utils import utc_now

DEFAULT_MIN_THRESHOLD = 10


@dataclass(frozen=True)
class StockMovement:
    """One entry of a stock's history. Never changed after it is appended."""
    type: MovementType
    quantity: int
    reason: str
    previous_quantity: int
    new_quantity: int
    timestamp: datetime = field(default_factory=utc_now)


@dataclass
class Stock:
    """Inventory level of a single product plus its movement history."""
    product_id: int
    quantity: int = 0
    min_threshold: int = DEFAULT_MIN_THRESHOLD
    last_updated: datetime = field(default_factory=utc_now)
    movements: List[StockMovement] = field(default_factory=list)

    def is_available(self) -> bool:
        return self.quantity > 0

    def is_low(self) -> bool:
        """True while 0 < quantity <= min_threshold."""
        return 0 < self.quantity <= self.min_threshold
