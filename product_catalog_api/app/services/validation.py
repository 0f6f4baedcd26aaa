"""
Validation of product payloads for create and update requests.

All checks run, so a client sees every problem with its payload in one
response.  Messages are reported in field order: name, description,
price, category, inStock.
"""

import math
from typing import Any, List, Mapping


NAME_MESSAGE = "Name is required and must be a non-empty string"
DESCRIPTION_MESSAGE = "Description is required and must be a non-empty string"
PRICE_MESSAGE = "Price is required and must be a positive number"
CATEGORY_MESSAGE = "Category is required and must be a non-empty string"
IN_STOCK_MESSAGE = "inStock must be a boolean value"


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_valid_price(value: Any) -> bool:
    # bool is a subclass of int but not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and number >= 0


def validate_product_payload(payload: Mapping[str, Any]) -> List[str]:
    """Return the list of violations found in ``payload`` (empty when valid)."""
    errors: List[str] = []
    if not _is_non_empty_text(payload.get("name")):
        errors.append(NAME_MESSAGE)
    if not _is_non_empty_text(payload.get("description")):
        errors.append(DESCRIPTION_MESSAGE)
    if not _is_valid_price(payload.get("price")):
        errors.append(PRICE_MESSAGE)
    if not _is_non_empty_text(payload.get("category")):
        errors.append(CATEGORY_MESSAGE)
    if "inStock" in payload and not isinstance(payload["inStock"], bool):
        errors.append(IN_STOCK_MESSAGE)
    return errors
