"""
Unit tests for the requests-based ProductsAPI client.

The HTTP session is mocked; responses are real ``requests.Response``
objects so that ``raise_for_status`` behaves as it does in production.
"""

import json
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from product_catalog_api.client import ProductsAPI


def make_response(status_code: int, body: Any) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8")
    response.url = "http://testserver/api/products"
    return response


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


class TestProductsAPI:

    def test_list_products_drops_unset_params(self, session: Mock) -> None:
        envelope = {"success": True, "data": [], "pagination": {}}
        session.request.return_value = make_response(200, envelope)
        client = ProductsAPI(base_url="http://testserver/", session=session)

        data, error = client.list_products(category="books", limit=5)

        assert error is None
        assert data == envelope
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://testserver/api/products"
        assert kwargs["params"] == {"category": "books", "limit": 5}
        assert "x-api-key" not in kwargs["headers"]

    def test_api_key_header_is_sent(self, session: Mock) -> None:
        session.request.return_value = make_response(201, {"success": True, "data": {"id": "1"}})
        client = ProductsAPI(base_url="http://testserver", api_key="secret", session=session)

        data, error = client.create_product({"name": "Lamp"})

        assert error is None
        assert data["data"]["id"] == "1"
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["headers"] == {"x-api-key": "secret"}
        assert kwargs["json"] == {"name": "Lamp"}

    def test_error_envelope_is_returned(self, session: Mock) -> None:
        session.request.return_value = make_response(
            404,
            {
                "success": False,
                "error": "NotFoundError",
                "message": "Product with ID x not found",
                "timestamp": "2024-01-01T00:00:00.000Z",
            },
        )
        client = ProductsAPI(base_url="http://testserver", session=session)

        data, error = client.get_product("x")

        assert data is None
        assert error == {
            "status_code": 404,
            "error": "NotFoundError",
            "message": "Product with ID x not found",
        }

    def test_update_and_delete_paths(self, session: Mock) -> None:
        session.request.return_value = make_response(200, {"success": True, "data": {}})
        client = ProductsAPI(base_url="http://testserver", api_key="k", session=session)

        client.update_product("abc", {"name": "Lamp"})
        assert session.request.call_args.kwargs["method"] == "PUT"
        assert session.request.call_args.kwargs["url"] == "http://testserver/api/products/abc"

        client.delete_product("abc")
        assert session.request.call_args.kwargs["method"] == "DELETE"
        assert session.request.call_args.kwargs["url"] == "http://testserver/api/products/abc"

    def test_search_and_stats_paths(self, session: Mock) -> None:
        session.request.return_value = make_response(200, {"success": True, "data": []})
        client = ProductsAPI(base_url="http://testserver", session=session)

        client.search_products("laptop")
        assert session.request.call_args.kwargs["url"] == "http://testserver/api/products/search"
        assert session.request.call_args.kwargs["params"] == {"q": "laptop"}

        client.get_stats()
        assert session.request.call_args.kwargs["url"] == "http://testserver/api/products/stats"

    def test_connection_error(self, session: Mock) -> None:
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = ProductsAPI(base_url="http://testserver", session=session)

        data, error = client.get_stats()

        assert data is None
        assert error["status_code"] is None
        assert error["error"] == "ConnectionError"
        assert "connection refused" in error["message"]
