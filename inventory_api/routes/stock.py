"""
API routes for stock levels and stock movements.

Movements are posted to /stock/{product_id}/entrada|salida|devolucion;
PUT /stock/{product_id} is an ajuste (absolute adjustment).
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from inventory_api.core.config import Settings
from inventory_api.core.enums import MovementType
from inventory_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from inventory_api.dependencies import get_app_settings, get_stock_service
from inventory_api.schemas.base import MessageResponse
from inventory_api.schemas.stock import StockCreate, StockMovementRead, StockRead, StockUpdate
from inventory_api.services.stock_service import StockService

router = APIRouter(prefix="/stock", tags=["stock"])


def _apply_movement(
    stock_service: StockService,
    product_id: int,
    stock_data: StockUpdate,
    movement_type: MovementType
) -> StockRead:
    try:
        return stock_service.update_stock(
            product_id,
            stock_data.quantity,
            stock_data.reason,
            movement_type
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", response_model=StockRead, status_code=status.HTTP_201_CREATED)
def create_stock(
    stock_data: StockCreate,
    stock_service: StockService = Depends(get_stock_service),
    settings: Settings = Depends(get_app_settings)
):
    """
    Register the stock record of a product.
    """
    try:
        return stock_service.create_stock(stock_data.product_id, stock_data.initial_quantity)
    except ConflictError as e:
        raise HTTPException(status_code=settings.STOCK_CONFLICT_STATUS_CODE, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("", response_model=List[StockRead])
def list_stock(
    stock_type: Optional[str] = Query(None, alias="type", description="'low' for low stock only, anything else for all"),
    stock_service: StockService = Depends(get_stock_service)
):
    try:
        if stock_type == "low":
            return stock_service.get_low_stock_products()
        return stock_service.get_all_stocks()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{product_id}", response_model=StockRead)
def get_stock(
    product_id: int,
    stock_service: StockService = Depends(get_stock_service)
):
    try:
        return stock_service.get_stock(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{product_id}/movements", response_model=List[StockMovementRead])
def get_stock_movements(
    product_id: int,
    stock_service: StockService = Depends(get_stock_service)
):
    """
    Movement history of a product, oldest first.
    """
    try:
        return stock_service.get_stock_movements(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/{product_id}/entrada", response_model=StockRead)
def stock_entry(
    product_id: int,
    stock_data: StockUpdate,
    stock_service: StockService = Depends(get_stock_service)
):
    """
    Inflow: purchase, production return.
    """
    return _apply_movement(stock_service, product_id, stock_data, MovementType.ENTRADA)

@router.post("/{product_id}/salida", response_model=StockRead)
def stock_exit(
    product_id: int,
    stock_data: StockUpdate,
    stock_service: StockService = Depends(get_stock_service)
):
    """
    Outflow: sale. Rejected with 400 when there is not enough stock.
    """
    return _apply_movement(stock_service, product_id, stock_data, MovementType.SALIDA)

@router.post("/{product_id}/devolucion", response_model=StockRead)
def stock_return(
    product_id: int,
    stock_data: StockUpdate,
    stock_service: StockService = Depends(get_stock_service)
):
    """
    Customer return.
    """
    return _apply_movement(stock_service, product_id, stock_data, MovementType.DEVOLUCION)

@router.put("/{product_id}", response_model=StockRead)
def adjust_stock(
    product_id: int,
    stock_data: StockUpdate,
    stock_service: StockService = Depends(get_stock_service)
):
    """
    Adjustment: the quantity sent replaces the current level.
    """
    return _apply_movement(stock_service, product_id, stock_data, MovementType.AJUSTE)

@router.delete("/{product_id}", response_model=MessageResponse)
def delete_stock(
    product_id: int,
    stock_service: StockService = Depends(get_stock_service)
):
    try:
        stock_service.delete_stock(product_id)
        return MessageResponse(message=f"Stock for product {product_id} deleted")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
