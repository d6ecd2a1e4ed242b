"""
Purpose: The in-memory stock ledger.

Role: Owns the product id -> Stock map. Stock references products by id only;
no check is made that the product exists in the catalog.

Movement rules (update_stock):
- entrada, devolución: quantity is added
- salida: quantity is subtracted; rejected when it would go below zero
- ajuste: quantity replaces the current level

Every successful movement is appended to the stock's history. Reads return
StockRead views whose status is derived from quantity and min_threshold at the
moment of the read.
"""

import logging
import threading
from typing import Dict, List, Optional, Union

from inventory_api.core.enums import MovementType, StockStatus
from inventory_api.core.exceptions import ConflictError, StockNotFoundError, ValidationError
from inventory_api.core.utils import utc_now, wrap_unexpected_errors
from inventory_api.models.stock import DEFAULT_MIN_THRESHOLD, Stock, StockMovement
from inventory_api.schemas.stock import StockMovementRead, StockRead

logger = logging.getLogger(__name__)


def derive_status(stock: Stock) -> StockStatus:
    if stock.quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if stock.is_low():
        return StockStatus.LOW
    return StockStatus.AVAILABLE


class StockService:
    def __init__(self, min_threshold: int = DEFAULT_MIN_THRESHOLD):
        self.min_threshold = min_threshold
        self._stocks: Dict[int, Stock] = {}
        self._lock = threading.RLock()

    def _get(self, product_id: int) -> Stock:
        stock = self._stocks.get(product_id)
        if stock is None:
            raise StockNotFoundError(f"No stock found for product {product_id}")
        return stock

    @staticmethod
    def _to_view(stock: Stock) -> StockRead:
        return StockRead(
            product_id=stock.product_id,
            quantity=stock.quantity,
            last_updated=stock.last_updated,
            status=derive_status(stock),
        )

    def create_stock(self, product_id: int, initial_quantity: int = 0) -> StockRead:
        """
        Registers the stock record of a product.

        A positive initial quantity is recorded as an "Initial stock" entrada.

        Raises:
            ConflictError: If the product already has a stock record
            ValidationError: If initial_quantity is negative
        """
        with self._lock, wrap_unexpected_errors("creating stock"):
            if product_id in self._stocks:
                raise ConflictError(f"Product {product_id} already has a stock record")
            if initial_quantity < 0:
                raise ValidationError("Initial quantity cannot be negative")

            stock = Stock(
                product_id=product_id,
                quantity=initial_quantity,
                min_threshold=self.min_threshold,
            )
            if initial_quantity > 0:
                stock.movements.append(StockMovement(
                    type=MovementType.ENTRADA,
                    quantity=initial_quantity,
                    reason="Initial stock",
                    previous_quantity=0,
                    new_quantity=initial_quantity,
                ))

            self._stocks[product_id] = stock
            logger.info(f"Created stock for product {product_id} with {initial_quantity} units")
            return self._to_view(stock)

    def get_stock(self, product_id: int) -> StockRead:
        with self._lock, wrap_unexpected_errors("fetching stock"):
            return self._to_view(self._get(product_id))

    def update_stock(
        self,
        product_id: int,
        quantity: int,
        reason: Optional[str] = None,
        movement_type: Union[MovementType, str] = MovementType.AJUSTE
    ) -> StockRead:
        """
        Applies a stock movement and records it in the history.

        Args:
            product_id: Product ID
            quantity: Units moved (for ajuste, the new absolute level). Must be > 0
            reason: Free text; defaults to "Movement of <type>"
            movement_type: entrada, salida, ajuste or devolución

        Raises:
            StockNotFoundError: If the product has no stock record
            ValidationError: If quantity <= 0, the type is unknown, or a salida
                asks for more than is available. The stock is left untouched.
        """
        with self._lock, wrap_unexpected_errors("updating stock"):
            stock = self._get(product_id)

            if quantity <= 0:
                raise ValidationError("Quantity must be greater than zero")
            try:
                movement_type = MovementType(movement_type)
            except ValueError:
                raise ValidationError(f"Invalid movement type: {movement_type}")

            previous_quantity = stock.quantity

            if movement_type.is_inflow:
                new_quantity = previous_quantity + quantity
            elif movement_type == MovementType.SALIDA:
                if previous_quantity < quantity:
                    logger.warning(
                        f"Rejected salida of {quantity} for product {product_id}: "
                        f"only {previous_quantity} available"
                    )
                    raise ValidationError(
                        f"Insufficient stock. Available: {previous_quantity}, requested: {quantity}"
                    )
                new_quantity = previous_quantity - quantity
            else:
                new_quantity = quantity

            stock.quantity = new_quantity
            stock.last_updated = utc_now()
            stock.movements.append(StockMovement(
                type=movement_type,
                quantity=quantity,
                reason=reason or f"Movement of {movement_type.value}",
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
                timestamp=stock.last_updated,
            ))

            logger.info(
                f"Stock {movement_type.value} for product {product_id}: "
                f"{previous_quantity} -> {new_quantity}"
            )
            return self._to_view(stock)

    def sell_product(self, product_id: int, quantity: int) -> StockRead:
        """Records a sale (salida)."""
        return self.update_stock(product_id, quantity, movement_type=MovementType.SALIDA)

    def add_stock(self, product_id: int, quantity: int, reason: Optional[str] = None) -> StockRead:
        """Records a purchase or other inflow (entrada)."""
        return self.update_stock(product_id, quantity, reason, MovementType.ENTRADA)

    def get_low_stock_products(self) -> List[StockRead]:
        """Stocks with 0 < quantity <= min_threshold. Empty stocks are not "low"."""
        with self._lock, wrap_unexpected_errors("fetching low stock products"):
            return [self._to_view(stock) for stock in self._stocks.values() if stock.is_low()]

    def get_stock_movements(self, product_id: int) -> List[StockMovementRead]:
        """Full movement history in the order it was recorded."""
        with self._lock, wrap_unexpected_errors("fetching stock movements"):
            return StockMovementRead.from_entities(self._get(product_id).movements)

    def get_all_stocks(self) -> List[StockRead]:
        with self._lock, wrap_unexpected_errors("fetching stocks"):
            return [self._to_view(stock) for stock in self._stocks.values()]

    def delete_stock(self, product_id: int) -> None:
        with self._lock, wrap_unexpected_errors("deleting stock"):
            self._get(product_id)
            del self._stocks[product_id]
            logger.info(f"Deleted stock for product {product_id}")
