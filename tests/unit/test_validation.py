"""
Unit tests for product payload validation.
"""

import pytest

from product_catalog_api.app.services.validation import (
    CATEGORY_MESSAGE,
    DESCRIPTION_MESSAGE,
    IN_STOCK_MESSAGE,
    NAME_MESSAGE,
    PRICE_MESSAGE,
    validate_product_payload,
)


VALID = {
    "name": "Desk Lamp",
    "description": "LED desk lamp",
    "price": 25,
    "category": "Home",
}


def with_fields(**fields):
    payload = dict(VALID)
    payload.update(fields)
    return payload


class TestValidateProductPayload:

    def test_valid_payload(self) -> None:
        assert validate_product_payload(VALID) == []

    def test_valid_with_in_stock(self) -> None:
        assert validate_product_payload(with_fields(inStock=False)) == []

    def test_zero_price_is_allowed(self) -> None:
        assert validate_product_payload(with_fields(price=0)) == []

    def test_empty_payload_reports_required_fields_in_order(self) -> None:
        assert validate_product_payload({}) == [
            NAME_MESSAGE,
            DESCRIPTION_MESSAGE,
            PRICE_MESSAGE,
            CATEGORY_MESSAGE,
        ]

    def test_all_violations_are_collected(self) -> None:
        payload = {
            "name": "   ",
            "description": 12,
            "price": -1,
            "category": "",
            "inStock": "yes",
        }

        assert validate_product_payload(payload) == [
            NAME_MESSAGE,
            DESCRIPTION_MESSAGE,
            PRICE_MESSAGE,
            CATEGORY_MESSAGE,
            IN_STOCK_MESSAGE,
        ]

    @pytest.mark.parametrize(
        "price", ["10", True, None, -0.01, float("nan"), float("inf"), int("9" * 400)]
    )
    def test_invalid_price(self, price) -> None:
        assert validate_product_payload(with_fields(price=price)) == [PRICE_MESSAGE]

    @pytest.mark.parametrize("in_stock", [None, 1, "true"])
    def test_invalid_in_stock(self, in_stock) -> None:
        assert validate_product_payload(with_fields(inStock=in_stock)) == [IN_STOCK_MESSAGE]
