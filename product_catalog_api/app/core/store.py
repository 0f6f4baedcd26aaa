"""
In-memory product storage.

``ProductStore`` is an ordered, mutable collection of products kept in
process memory.  Order is insertion order and nothing is indexed:
every lookup is a linear scan.  The store is owned by the application
instance (see ``create_app``) and handed to request handlers through a
dependency, so each app, and each test, works on its own collection.

There is no locking.  Handlers run their store operations synchronously
within a single request, and the collection is lost when the process
exits.  ``init_store`` builds a store preloaded with the seed catalogue.
"""

import uuid
from typing import Iterable, List, Optional

from ..schemas.product import Product


class ProductStore:
    """Ordered collection of products."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: List[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._products)

    def append(self, product: Product) -> None:
        self._products.append(product)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_index_by_id(self, product_id: str) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def get_at(self, index: int) -> Product:
        return self._products[index]

    def remove_at(self, index: int) -> Product:
        return self._products.pop(index)

    def replace_at(self, index: int, product: Product) -> None:
        self._products[index] = product

    def all(self) -> List[Product]:
        """Return a snapshot of the products.

        The returned list is a copy, so callers may filter or reorder it
        without affecting the store.
        """
        return list(self._products)


SEED_PRODUCTS = [
    {
        "name": "Gaming Laptop",
        "description": "High-performance gaming laptop with RTX 4070 graphics card",
        "price": 1299.99,
        "category": "Electronics",
        "in_stock": True,
    },
    {
        "name": "Espresso Machine",
        "description": "Professional espresso machine with milk frother",
        "price": 299.99,
        "category": "Kitchen",
        "in_stock": True,
    },
    {
        "name": "JavaScript Masterclass",
        "description": "Complete guide to modern JavaScript and Node.js development",
        "price": 49.99,
        "category": "Books",
        "in_stock": False,
    },
    {
        "name": "Wireless Headphones",
        "description": "Premium noise-cancelling wireless headphones",
        "price": 249.99,
        "category": "Electronics",
        "in_stock": True,
    },
    {
        "name": "Smart Blender",
        "description": "High-speed smart blender with app connectivity",
        "price": 179.99,
        "category": "Kitchen",
        "in_stock": True,
    },
    {
        "name": "Web Development Handbook",
        "description": "Comprehensive guide to full-stack web development",
        "price": 39.99,
        "category": "Books",
        "in_stock": True,
    },
]


def seed_products() -> List[Product]:
    """Build the seed catalogue, minting a fresh identifier for each product."""
    return [Product(id=str(uuid.uuid4()), **fields) for fields in SEED_PRODUCTS]


def init_store() -> ProductStore:
    """Create a store holding the seed catalogue."""
    return ProductStore(seed_products())
