"""
Shared enums and constants used across the application.
"""

from enum import Enum


class MovementType(str, Enum):
    """Stock movement kinds recorded in a stock's history"""
    ENTRADA = "entrada"        # inflow: purchase, production return
    SALIDA = "salida"          # outflow: sale
    AJUSTE = "ajuste"          # absolute replacement of the quantity
    DEVOLUCION = "devolución"  # customer return

    @property
    def is_inflow(self) -> bool:
        return self in (MovementType.ENTRADA, MovementType.DEVOLUCION)


class StockStatus(str, Enum):
    """Derived availability of a stock record"""
    AVAILABLE = "available"
    LOW = "low"
    OUT_OF_STOCK = "out_of_stock"
