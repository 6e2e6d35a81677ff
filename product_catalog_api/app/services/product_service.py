"""
Business logic for products.

``ProductService`` wraps a ``ProductStore`` and exposes the five
catalogue operations.  Each operation returns an ``Ok``, ``Created``
or ``NotFound`` result value; see ``services.results``.  The service
is cheap to construct, so the API layer builds one per request around
the store owned by the application.
"""

import logging
from decimal import Decimal
from typing import List, Union

from ..schemas.product import Product
from .product_store import ProductStore
from .results import Created, NotFound, Ok

logger = logging.getLogger(__name__)


class ProductService:
    """Service for managing the product collection."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    def list_products(self) -> Ok[List[Product]]:
        """Return every product in insertion order."""
        logger.info("Getting all products")
        return Ok(self.store.all())

    def get_product(self, product_id: int) -> Union[Ok[Product], NotFound]:
        logger.info("Getting product with ID: %s", product_id)
        product = self.store.find(product_id)
        if product is None:
            logger.warning("Product with ID %s not found", product_id)
            return NotFound(product_id)
        return Ok(product)

    def create_product(self, name: str, description: str, price: Decimal) -> Created[Product]:
        """Create a product with the next free id.

        No checks are made on the name, the description or the sign of
        the price.
        """
        logger.info("Creating new product: %s", name)
        product = self.store.add(name, description, price)
        return Created(product, product.id)

    def update_product(
        self, product_id: int, name: str, description: str, price: Decimal
    ) -> Union[Ok[Product], NotFound]:
        """Replace every field of an existing product except its id."""
        logger.info("Updating product with ID: %s", product_id)
        product = self.store.replace(product_id, name, description, price)
        if product is None:
            logger.warning("Product with ID %s not found for update", product_id)
            return NotFound(product_id)
        return Ok(product)

    def delete_product(self, product_id: int) -> Union[Ok[None], NotFound]:
        logger.info("Deleting product with ID: %s", product_id)
        if not self.store.remove(product_id):
            logger.warning("Product with ID %s not found for deletion", product_id)
            return NotFound(product_id)
        return Ok(None)
