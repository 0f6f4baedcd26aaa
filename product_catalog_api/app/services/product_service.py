"""
Business logic for products.

``ProductService`` wraps a ``ProductStore`` and implements every
operation exposed by the API.  Methods never raise for expected
failures; they return ``Ok`` or ``Err`` (see ``services.result``) and
leave the HTTP rendering to the endpoints.
"""

import logging
import uuid
from typing import Any, Mapping, Optional

from ..core.errors import NotFoundError, ValidationError
from ..core.store import ProductStore
from ..schemas.product import Product, ProductPage, ProductStats, SearchPagination, SearchResults
from .queries import compute_stats, filter_by_category, paginate, parse_pagination, search_products
from .result import Err, Ok, Result
from .validation import validate_product_payload


logger = logging.getLogger(__name__)


def _not_found(product_id: str) -> Err:
    return Err(NotFoundError(f"Product with ID {product_id} not found"))


class ProductService:
    """Service for managing the product catalogue held in a store."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    def list_products(
        self,
        category: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Result[ProductPage]:
        """Return one page of products, optionally filtered by category.

        ``page`` and ``limit`` are the raw query string values; invalid
        ones produce a ``ValidationError``.
        """
        parsed = parse_pagination(page, limit)
        if isinstance(parsed, Err):
            return parsed
        page_num, limit_num = parsed.value
        filtered = filter_by_category(self.store.all(), category)
        items, pagination = paginate(filtered, page_num, limit_num)
        return Ok(ProductPage(data=items, pagination=pagination))

    def get_product(self, product_id: str) -> Result[Product]:
        product = self.store.find_by_id(product_id)
        if product is None:
            return _not_found(product_id)
        return Ok(product)

    def search(
        self,
        q: Optional[str],
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Result[SearchResults]:
        """Search names and descriptions for ``q``.

        Results are paginated like listings, but the metadata carries no
        next/previous flags.
        """
        if not q:
            return Err(ValidationError("Search term (q) is required"))
        parsed = parse_pagination(page, limit)
        if isinstance(parsed, Err):
            return parsed
        page_num, limit_num = parsed.value
        matches = search_products(self.store.all(), q)
        items, pagination = paginate(matches, page_num, limit_num)
        return Ok(
            SearchResults(
                search_term=q,
                data=items,
                pagination=SearchPagination(
                    current_page=pagination.current_page,
                    total_pages=pagination.total_pages,
                    total_items=pagination.total_items,
                    items_per_page=pagination.items_per_page,
                ),
            )
        )

    def stats(self) -> Result[ProductStats]:
        return Ok(compute_stats(self.store.all()))

    @staticmethod
    def _validate(payload: Any) -> Optional[Err]:
        errors = validate_product_payload(payload)
        if errors:
            return Err(ValidationError(", ".join(errors)))
        return None

    def create_product(self, payload: Mapping[str, Any]) -> Result[Product]:
        """Validate ``payload`` and append a new product to the store.

        Text fields are trimmed, the price is stored as a float and
        ``inStock`` defaults to ``True``.
        """
        if not isinstance(payload, Mapping):
            payload = {}
        failure = self._validate(payload)
        if failure:
            return failure
        product = Product(
            id=str(uuid.uuid4()),
            name=payload["name"].strip(),
            description=payload["description"].strip(),
            price=float(payload["price"]),
            category=payload["category"].strip(),
            in_stock=payload.get("inStock", True),
        )
        self.store.append(product)
        logger.info("Created product %s '%s'", product.id, product.name)
        return Ok(product)

    def update_product(self, product_id: str, payload: Mapping[str, Any]) -> Result[Product]:
        """Replace the fields of an existing product.

        The full payload is required, exactly as for creation.  The
        identifier never changes, and ``inStock`` keeps its previous
        value when the payload omits it.
        """
        if not isinstance(payload, Mapping):
            payload = {}
        failure = self._validate(payload)
        if failure:
            return failure
        index = self.store.find_index_by_id(product_id)
        if index is None:
            return _not_found(product_id)
        current = self.store.get_at(index)
        updated = current.model_copy(
            update={
                "name": payload["name"].strip(),
                "description": payload["description"].strip(),
                "price": float(payload["price"]),
                "category": payload["category"].strip(),
                "in_stock": payload.get("inStock", current.in_stock),
            }
        )
        self.store.replace_at(index, updated)
        logger.info("Updated product %s", product_id)
        return Ok(updated)

    def delete_product(self, product_id: str) -> Result[Product]:
        index = self.store.find_index_by_id(product_id)
        if index is None:
            return _not_found(product_id)
        removed = self.store.remove_at(index)
        logger.info("Deleted product %s '%s'", removed.id, removed.name)
        return Ok(removed)
