"""Entry point for the Products API.

Starts the FastAPI application with Uvicorn.  Host, port and the API
key are read from environment variables (``HOST``, ``PORT``,
``API_KEY``); see ``product_catalog_api/app/core/config.py`` for every
supported variable and its default.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.core.security import API_KEY_HEADER
from product_catalog_api.app.main import app


logger = logging.getLogger("product_catalog_api")

ENDPOINTS = [
    ("GET", "/", "Hello World"),
    ("GET", "/api/products", "Get all products (with filtering & pagination)"),
    ("GET", "/api/products/:id", "Get product by ID"),
    ("GET", "/api/products/search", "Search products by name or description"),
    ("GET", "/api/products/stats", "Get product statistics"),
    ("POST", "/api/products", "Create new product (requires API key)"),
    ("PUT", "/api/products/:id", "Update product (requires API key)"),
    ("DELETE", "/api/products/:id", "Delete product (requires API key)"),
]


def log_banner() -> None:
    """Log the address of the server and the available endpoints."""
    logger.info("Server is running on http://%s:%s", settings.host, settings.port)
    logger.info("Available API endpoints:")
    for method, path, description in ENDPOINTS:
        logger.info("%-7s %-22s - %s", method, path, description)
    logger.info("Authenticated routes expect the header: %s", API_KEY_HEADER)


async def run_api() -> None:
    """Serve the API using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    log_banner()
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
