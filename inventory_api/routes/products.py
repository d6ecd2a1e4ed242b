"""
API routes for the product catalog.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from inventory_api.dependencies import get_product_service
from inventory_api.schemas.base import MessageResponse
from inventory_api.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductStatistics,
    ProductStatusChange,
    ProductUpdate
)
from inventory_api.services.product_service import ProductService
from inventory_api.core.exceptions import NotFoundError, ValidationError

router = APIRouter(prefix="/products", tags=["products"])

@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.
    """
    try:
        return product_service.create(**product_data.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("", response_model=List[ProductRead])
def list_products(
    only_active: Optional[str] = Query(None, alias="onlyActive"),
    product_service: ProductService = Depends(get_product_service)
):
    """
    List products. Inactive ones are hidden unless onlyActive=false.
    """
    try:
        return product_service.find_all(only_active != "false")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/search/{term}", response_model=List[ProductRead])
def search_products(
    term: str,
    product_service: ProductService = Depends(get_product_service)
):
    try:
        return product_service.search(term)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/category/{name}", response_model=List[ProductRead])
def products_by_category(
    name: str,
    product_service: ProductService = Depends(get_product_service)
):
    try:
        return product_service.find_by_category(name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/price-range/{min_price}/{max_price}", response_model=List[ProductRead])
def products_by_price_range(
    min_price: float,
    max_price: float,
    product_service: ProductService = Depends(get_product_service)
):
    try:
        return product_service.find_by_price_range(min_price, max_price)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/admin/statistics", response_model=ProductStatistics)
def catalog_statistics(product_service: ProductService = Depends(get_product_service)):
    """
    Catalog summary for dashboards.
    """
    try:
        return product_service.get_statistics()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Get a product by ID.
    """
    try:
        return product_service.find_one(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Update a product. Only the fields sent in the body are changed.
    """
    try:
        return product_service.update(
            product_id,
            product_data.model_dump(exclude_unset=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{product_id}/deactivate", response_model=ProductStatusChange)
def deactivate_product(
    product_id: int,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Soft delete: the product stays in the catalog but is hidden from active listings.
    """
    try:
        product = product_service.deactivate(product_id)
        return ProductStatusChange(message=f"Product {product_id} deactivated", product=product)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.put("/{product_id}/activate", response_model=ProductStatusChange)
def activate_product(
    product_id: int,
    product_service: ProductService = Depends(get_product_service)
):
    try:
        product = product_service.activate(product_id)
        return ProductStatusChange(message=f"Product {product_id} activated", product=product)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    product_service: ProductService = Depends(get_product_service)
):
    """
    Permanently delete a product.
    """
    try:
        product_service.remove(product_id)
        return MessageResponse(message=f"Product {product_id} permanently deleted")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
