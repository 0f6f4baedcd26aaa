"""
Top-level router of the API.

This router aggregates the domain-specific routers.  When new
endpoints or domains are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import info, products

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(products.router, prefix="/api/products", tags=["products"])
