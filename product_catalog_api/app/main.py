"""
Main entrypoint for the Products API.

This module assembles the FastAPI application, sets up logging,
installs the error translators and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

The product store is owned by the application: ``create_app`` accepts
an existing ``ProductStore`` (handy in tests) and otherwise creates one
holding the seed catalogue.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import log_requests, setup_logging
from .core.store import ProductStore, init_store
from .api.router import router


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    store : Optional[ProductStore]
        Product store to serve.  Defaults to a new store preloaded with
        the seed catalogue.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the steps below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else init_store()

    app.middleware("http")(log_requests)
    register_exception_handlers(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
