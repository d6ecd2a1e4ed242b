class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class ValidationError(BaseServiceError):
    """Raised when input is malformed or breaks a business rule."""
    pass

class NotFoundError(BaseServiceError):
    """Raised when the requested entity does not exist."""
    pass

class ProductNotFoundError(NotFoundError):
    """Raised when product is not found."""
    pass

class StockNotFoundError(NotFoundError):
    """Raised when no stock record exists for a product."""
    pass

class ConflictError(BaseServiceError):
    """Raised when creating an entity that already exists."""
    pass
