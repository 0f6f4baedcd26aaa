"""
Pydantic models for product data.

``Product`` is the single managed record.  The remaining models shape
query results: paginated listings, search results and aggregate
statistics.  Python attributes use snake_case; JSON uses camelCase
(``inStock``, ``currentPage``, ...), so always dump with
``by_alias=True`` when rendering a response.
"""

from typing import Dict, List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class Product(CamelModel):
    """A product held in the store."""

    id: str = Field(..., examples=["3f1c9a54-0d4e-4f0e-9b7a-2f6f1d2a8c11"])
    name: str = Field(..., examples=["Gaming Laptop"])
    description: str = Field(..., examples=["High-performance gaming laptop"])
    price: float = Field(..., ge=0, examples=[1299.99])
    category: str = Field(..., examples=["Electronics"])
    in_stock: bool = True


class SearchPagination(CamelModel):
    """Pagination metadata reported for search results."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class Pagination(SearchPagination):
    """Pagination metadata reported for product listings."""

    has_next_page: bool
    has_previous_page: bool


class ProductPage(CamelModel):
    """One page of a (possibly filtered) product listing."""

    data: List[Product]
    pagination: Pagination


class SearchResults(CamelModel):
    """One page of products matching a search term."""

    search_term: str
    data: List[Product]
    pagination: SearchPagination


class PriceRange(CamelModel):
    min: float = 0
    max: float = 0


class ProductStats(CamelModel):
    """Aggregate statistics over every product in the store."""

    total_products: int
    in_stock_count: int
    out_of_stock_count: int
    category_breakdown: Dict[str, int]
    average_price: float
    price_range: PriceRange
