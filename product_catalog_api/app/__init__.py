"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, errors, authentication
and the in-memory store), ``schemas`` (Pydantic models), ``services``
(business logic and queries) and ``api`` (routers and response
rendering).
"""

from .main import app, create_app  # noqa: F401
