"""Products API client.

This module defines a thin client around the Products HTTP API.  It
uses the ``requests`` library internally and exposes one method per
endpoint:

* :meth:`ProductsAPI.list_products` – list products with category filter and pagination.
* :meth:`ProductsAPI.get_product` – fetch a single product by identifier.
* :meth:`ProductsAPI.search_products` – search names and descriptions.
* :meth:`ProductsAPI.get_stats` – aggregate statistics.
* :meth:`ProductsAPI.create_product` – create a product (API key required).
* :meth:`ProductsAPI.update_product` – replace a product (API key required).
* :meth:`ProductsAPI.delete_product` – delete a product (API key required).

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded response envelope and ``error`` is ``None``.  On
failure ``data`` is ``None`` and ``error`` is a dictionary with the
keys ``status_code``, ``error`` and ``message`` taken from the server's
error envelope when one is available.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Outcome = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class ProductsAPI:
    """Client for interacting with the Products API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            api_key: Optional API key.  If set, it is sent in the
                ``x-api-key`` header of every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Outcome:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/products``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            response = exc.response
            status = response.status_code if response is not None else None
            kind = "HTTPError"
            message = ""
            if response is not None:
                try:
                    body = response.json()
                    kind = body.get("error") or kind
                    message = body.get("message") or ""
                except ValueError:
                    message = response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "error": kind, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": type(exc).__name__, "message": str(exc)}

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def list_products(
        self,
        category: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Outcome:
        return self._request(
            "GET", "/api/products", params={"category": category, "page": page, "limit": limit}
        )

    def get_product(self, product_id: str) -> Outcome:
        return self._request("GET", f"/api/products/{product_id}")

    def search_products(
        self, q: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Outcome:
        return self._request(
            "GET", "/api/products/search", params={"q": q, "page": page, "limit": limit}
        )

    def get_stats(self) -> Outcome:
        return self._request("GET", "/api/products/stats")

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------
    def create_product(self, product: Dict[str, Any]) -> Outcome:
        """Create a product from a dict with ``name``, ``description``,
        ``price``, ``category`` and optionally ``inStock``."""
        return self._request("POST", "/api/products", json_body=product)

    def update_product(self, product_id: str, product: Dict[str, Any]) -> Outcome:
        """Replace a product.  The full payload is required."""
        return self._request("PUT", f"/api/products/{product_id}", json_body=product)

    def delete_product(self, product_id: str) -> Outcome:
        return self._request("DELETE", f"/api/products/{product_id}")
