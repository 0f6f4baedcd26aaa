"""
Information endpoint.

The root route returns a greeting together with the API version and a
map of the main endpoints so that clients can discover them.  It is
publicly accessible.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.errors import utc_timestamp
from product_catalog_api.app.core.security import get_settings

router = APIRouter()


@router.get("/")
async def get_info(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "message": f"Hello World! Welcome to the {settings.project_name}",
        "version": settings.api_version,
        "timestamp": utc_timestamp(),
        "endpoints": {
            "products": "/api/products",
            "search": "/api/products/search",
            "stats": "/api/products/stats",
        },
    }
