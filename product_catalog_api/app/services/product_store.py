"""
In-memory storage for products.

``ProductStore`` owns the ordered list of live ``Product`` records.
A single lock guards every scan and mutation, which also makes id
assignment atomic: two concurrent ``add`` calls can never compute
the same ``max(id) + 1``.

The store is created by ``create_app`` and kept on ``app.state``;
nothing in the package holds it as a module level global.  Its
contents are lost when the process exits.
"""

import threading
from decimal import Decimal
from typing import Iterable, List, Optional

from ..schemas.product import Product

# Id given to the first product of an empty collection.
FIRST_PRODUCT_ID = 1

SEED_PRODUCTS = (
    Product(id=1, name="Laptop", description="High-performance laptop", price=Decimal("999.99")),
    Product(id=2, name="Mouse", description="Wireless mouse", price=Decimal("29.99")),
    Product(id=3, name="Keyboard", description="Mechanical keyboard", price=Decimal("89.99")),
)


class ProductStore:
    """Ordered, lock-guarded collection of products."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.Lock()
        self._products: List[Product] = list(products)

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Return a store holding the three demonstration products."""
        return cls(SEED_PRODUCTS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def all(self) -> List[Product]:
        """Return a snapshot of the collection in insertion order."""
        with self._lock:
            return list(self._products)

    def find(self, product_id: int) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index]

    def add(self, name: str, description: str, price: Decimal) -> Product:
        """Append a new product and return it.

        The id is one more than the largest id currently stored.  On an
        empty collection it is ``FIRST_PRODUCT_ID``.  Because ids derive
        from the live maximum, deleting the newest product and creating
        another hands out the same id again.
        """
        with self._lock:
            if self._products:
                new_id = max(p.id for p in self._products) + 1
            else:
                new_id = FIRST_PRODUCT_ID
            product = Product(id=new_id, name=name, description=description, price=price)
            self._products.append(product)
            return product

    def replace(self, product_id: int, name: str, description: str, price: Decimal) -> Optional[Product]:
        """Replace the record with ``product_id`` in place.

        Returns the new record, or ``None`` if no product has that id.
        The replacement keeps the original list position.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = Product(id=product_id, name=name, description=description, price=price)
            self._products[index] = product
            return product

    def remove(self, product_id: int) -> bool:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return False
            del self._products[index]
            return True

    def _index_of(self, product_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
