"""
Purpose: The in-memory product catalog.

Role: Owns the id -> Product map and the id counter. Every read hands back a
ProductRead snapshot, so callers never hold a reference to stored state.

Operations:
- create / update / activate / deactivate / remove (hard delete)
- lookups: find_all, find_one, search by name, filter by category and by price range
- catalog statistics

Each operation runs under the store lock, so concurrent requests served from
FastAPI's thread pool never interleave on the map or the counter. Domain errors
(ValidationError, ProductNotFoundError) propagate unchanged; anything unexpected
is reported as a ValidationError.
"""

import logging
import threading
from typing import Any, Dict, List

from inventory_api.core.exceptions import ProductNotFoundError, ValidationError
from inventory_api.core.utils import utc_now, wrap_unexpected_errors
from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductRead, ProductStatistics

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "price", "category")


class ProductService:
    def __init__(self):
        self._products: Dict[int, Product] = {}
        self._id_counter = 1
        self._lock = threading.RLock()

    def _get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return product

    def create(self, name: str, description: str, price: float, category: str) -> ProductRead:
        """
        Adds a product to the catalog under the next sequential id.

        Raises:
            ValidationError: If the name is blank or the price is not positive
        """
        with self._lock, wrap_unexpected_errors("creating product"):
            if not name or not name.strip():
                raise ValidationError("Product name is required")
            if price <= 0:
                raise ValidationError("Price must be greater than 0")

            product = Product(
                id=self._id_counter,
                name=name,
                description=description,
                price=price,
                category=category,
            )
            self._products[product.id] = product
            self._id_counter += 1

            logger.info(f"Created product {product.id} ({product.name})")
            return ProductRead.from_entity(product)

    def find_all(self, only_active: bool = True) -> List[ProductRead]:
        """Every product in insertion order, optionally only the active ones."""
        with self._lock, wrap_unexpected_errors("listing products"):
            return ProductRead.from_entities([
                product for product in self._products.values()
                if product.is_active or not only_active
            ])

    def find_one(self, product_id: int) -> ProductRead:
        """
        Raises:
            ProductNotFoundError: If no product has this id
        """
        with self._lock, wrap_unexpected_errors("fetching product"):
            return ProductRead.from_entity(self._get(product_id))

    def search(self, term: str) -> List[ProductRead]:
        """Case-insensitive substring match on the product name."""
        with self._lock, wrap_unexpected_errors("searching products"):
            if not term or not term.strip():
                raise ValidationError("Search term is required")

            needle = term.lower()
            return ProductRead.from_entities([
                product for product in self._products.values()
                if needle in product.name.lower()
            ])

    def find_by_category(self, category: str) -> List[ProductRead]:
        """Active products whose category matches, ignoring case."""
        with self._lock, wrap_unexpected_errors("filtering by category"):
            if not category or not category.strip():
                raise ValidationError("Category is required")

            wanted = category.lower()
            return ProductRead.from_entities([
                product for product in self._products.values()
                if product.is_active and product.category.lower() == wanted
            ])

    def find_by_price_range(self, min_price: float, max_price: float) -> List[ProductRead]:
        """Active products with min_price <= price <= max_price."""
        with self._lock, wrap_unexpected_errors("filtering by price"):
            if min_price < 0 or max_price < 0:
                raise ValidationError("Prices cannot be negative")
            if min_price > max_price:
                raise ValidationError("Minimum price cannot be greater than maximum price")

            return ProductRead.from_entities([
                product for product in self._products.values()
                if product.is_active and min_price <= product.price <= max_price
            ])

    def update(self, product_id: int, fields: Dict[str, Any]) -> ProductRead:
        """
        Applies a partial update. Only keys present in ``fields`` are touched;
        ``updated_at`` is refreshed even when nothing else changes.

        Args:
            product_id: Product ID
            fields: Subset of name, description, price, category

        Raises:
            ProductNotFoundError: If the product does not exist
            ValidationError: If the name is blank or the price is negative
        """
        with self._lock, wrap_unexpected_errors("updating product"):
            product = self._get(product_id)
            changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}

            if "name" in changes and not changes["name"].strip():
                raise ValidationError("Product name cannot be empty")

            # Price goes first: it is the only rule checked by the entity itself
            if "price" in changes:
                product.update_price(changes["price"])
            if "name" in changes:
                product.name = changes["name"]
            if "description" in changes:
                product.description = changes["description"]
            if "category" in changes:
                product.category = changes["category"]

            product.updated_at = utc_now()

            logger.info(f"Updated product {product_id}: {sorted(changes)}")
            return ProductRead.from_entity(product)

    def deactivate(self, product_id: int) -> ProductRead:
        """Soft delete. Deactivating an inactive product is not an error."""
        with self._lock, wrap_unexpected_errors("deactivating product"):
            product = self._get(product_id)
            product.deactivate()
            logger.info(f"Deactivated product {product_id}")
            return ProductRead.from_entity(product)

    def activate(self, product_id: int) -> ProductRead:
        with self._lock, wrap_unexpected_errors("activating product"):
            product = self._get(product_id)
            product.activate()
            logger.info(f"Activated product {product_id}")
            return ProductRead.from_entity(product)

    def remove(self, product_id: int) -> None:
        """Hard delete."""
        with self._lock, wrap_unexpected_errors("deleting product"):
            self._get(product_id)
            del self._products[product_id]
            logger.info(f"Permanently deleted product {product_id}")

    def get_statistics(self) -> ProductStatistics:
        """
        Catalog summary for dashboards. The average price and the category
        list only consider active products.
        """
        with self._lock, wrap_unexpected_errors("computing statistics"):
            all_products = list(self._products.values())
            active = [product for product in all_products if product.is_active]

            average_price = sum(product.price for product in active) / len(active) if active else 0

            return ProductStatistics(
                total_products=len(all_products),
                active_products=len(active),
                inactive_products=len(all_products) - len(active),
                average_price=round(average_price, 2),
                categories=list(dict.fromkeys(product.category for product in active)),
            )
