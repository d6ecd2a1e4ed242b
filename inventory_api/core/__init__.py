"""
Core module exports.
"""
from .enums import (
    MovementType,
    StockStatus
)

from .exceptions import (
    BaseServiceError,
    ValidationError,
    NotFoundError,
    ProductNotFoundError,
    StockNotFoundError,
    ConflictError
)

from .utils import utc_now, wrap_unexpected_errors
