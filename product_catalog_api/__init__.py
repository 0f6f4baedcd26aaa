"""
Top-level package for the Products API.

The HTTP service lives in the ``app`` subpackage
(``product_catalog_api.app.main``); ``client`` provides a small
``requests``-based client for talking to a running instance.
"""

__all__ = []
