"""
Product endpoints.

Reads (listing, search, statistics and lookup by ID) are public.
Create, update and delete require the ``x-api-key`` header, checked by
the ``require_api_key`` route dependency before the body is read.

``/search`` and ``/stats`` are declared before ``/{product_id}`` so
that they are not captured as product identifiers.
"""

import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from product_catalog_api.app.api.responses import render
from product_catalog_api.app.core.errors import MalformedBodyError
from product_catalog_api.app.core.security import require_api_key
from product_catalog_api.app.services.product_service import ProductService


router = APIRouter()


def get_product_service(request: Request) -> ProductService:
    """Dependency building a service around the application's store."""
    return ProductService(request.app.state.store)


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON.

    An empty body, or one not declared as JSON (``application/json`` or
    a ``+json`` media type), is treated as an empty object.  A JSON body
    that does not decode raises ``MalformedBodyError``.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json" and not media_type.endswith("+json"):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        raise MalformedBodyError() from e


@router.get("")
async def list_products(
    category: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """List products with optional category filter and pagination.

    - **category**: case-insensitive substring of the product category.
    - **page**, **limit**: positive integers, default 1 and 10.
    """
    return render(service.list_products(category=category, page=page, limit=limit))


@router.get("/search")
async def search_products(
    q: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Search product names and descriptions for **q** (required)."""
    return render(service.search(q, page=page, limit=limit))


@router.get("/stats")
async def product_stats(service: ProductService = Depends(get_product_service)) -> JSONResponse:
    return render(service.stats())


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return render(service.get_product(product_id))


@router.post("", dependencies=[Depends(require_api_key)])
async def create_product(
    payload: Any = Depends(read_json_body),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Create a product.  Responds with 201 and the stored record."""
    return render(
        service.create_product(payload),
        status_code=status.HTTP_201_CREATED,
        message="Product created successfully",
    )


@router.put("/{product_id}", dependencies=[Depends(require_api_key)])
async def update_product(
    product_id: str,
    payload: Any = Depends(read_json_body),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Replace a product's fields.

    All of name, description, price and category must be supplied;
    partial updates are not supported.  ``inStock`` may be omitted to
    keep its current value.
    """
    return render(service.update_product(product_id, payload), message="Product updated successfully")


@router.delete("/{product_id}", dependencies=[Depends(require_api_key)])
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    """Delete a product and return the removed record."""
    return render(service.delete_product(product_id), message="Product deleted successfully")
