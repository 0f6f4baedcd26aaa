"""
Read-only queries over a snapshot of products.

Every function here is pure: it receives a list of products (normally
``ProductStore.all()``) and returns a new view of it.  Filtering and
searching are case-insensitive substring matches evaluated by linear
scan.
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.errors import ValidationError
from ..schemas.product import Pagination, PriceRange, Product, ProductStats
from .result import Err, Ok, Result


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def filter_by_category(products: Sequence[Product], category: Optional[str]) -> List[Product]:
    """Keep products whose category contains ``category`` (any case).

    An empty or missing category disables the filter.
    """
    if not category:
        return list(products)
    needle = category.lower()
    return [p for p in products if needle in p.category.lower()]


def search_products(products: Sequence[Product], term: str) -> List[Product]:
    """Keep products whose name or description contains ``term`` (any case)."""
    needle = term.lower()
    return [
        p for p in products
        if needle in p.name.lower() or needle in p.description.lower()
    ]


def _parse_positive_int(name: str, raw: Optional[str], default: int) -> Tuple[int, Optional[str]]:
    if raw is None or raw == "":
        return default, None
    text = raw.strip()
    if not (text.isascii() and text.isdigit()) or int(text) < 1:
        return default, f"{name} must be a positive integer"
    return int(text), None


def parse_pagination(page: Optional[str], limit: Optional[str]) -> Result[Tuple[int, int]]:
    """Parse the textual ``page`` and ``limit`` query values.

    Missing values fall back to page 1 and 10 items per page.  Anything
    that is not a base-10 integer of at least 1 is rejected with a
    ``ValidationError`` listing each offending parameter.
    """
    page_num, page_error = _parse_positive_int("page", page, DEFAULT_PAGE)
    limit_num, limit_error = _parse_positive_int("limit", limit, DEFAULT_LIMIT)
    errors = [e for e in (page_error, limit_error) if e]
    if errors:
        return Err(ValidationError(", ".join(errors)))
    return Ok((page_num, limit_num))


def paginate(items: Sequence[Product], page: int, limit: int) -> Tuple[List[Product], Pagination]:
    """Return the requested page of ``items`` and its pagination metadata."""
    start = (page - 1) * limit
    end = start + limit
    total = len(items)
    pagination = Pagination(
        current_page=page,
        total_pages=math.ceil(total / limit),
        total_items=total,
        items_per_page=limit,
        has_next_page=end < total,
        has_previous_page=page > 1,
    )
    return list(items[start:end]), pagination


def round_half_up(value: float, digits: int = 2) -> float:
    scale = 10 ** digits
    scaled = value * scale
    # floats this large carry no fractional digits
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


def compute_stats(products: Sequence[Product]) -> ProductStats:
    """Aggregate counts and price figures over ``products``.

    An empty sequence yields zero for the average price and for both
    ends of the price range.
    """
    total = len(products)
    in_stock = sum(1 for p in products if p.in_stock)

    breakdown: Dict[str, int] = {}
    for product in products:
        breakdown[product.category] = breakdown.get(product.category, 0) + 1

    average_price = 0.0
    price_range = PriceRange(min=0, max=0)
    if products:
        prices = [p.price for p in products]
        count = len(prices)
        average_price = round_half_up(sum(price / count for price in prices))
        price_range = PriceRange(min=min(prices), max=max(prices))

    return ProductStats(
        total_products=total,
        in_stock_count=in_stock,
        out_of_stock_count=total - in_stock,
        category_breakdown=breakdown,
        average_price=average_price,
        price_range=price_range,
    )
