"""
API key authentication for mutating endpoints.

Clients authenticate create, update and delete requests by sending the
static shared secret in the ``x-api-key`` header.  The secret comes
from the ``Settings`` attached to the running application, so tests and
alternative deployments can inject their own value through
``create_app(settings=...)``.  There is no hashing, rotation or rate
limiting.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from .config import Settings
from .errors import AuthenticationError


API_KEY_HEADER = "x-api-key"

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings of the application serving ``request``."""
    return request.app.state.settings


def require_api_key(
    api_key: Optional[str] = Depends(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that rejects requests without the configured API key.

    Raises :class:`AuthenticationError` when the header is absent or
    does not exactly match ``settings.api_key``.
    """
    if not api_key:
        raise AuthenticationError("API key is required. Please provide x-api-key header.")
    if api_key != settings.api_key:
        raise AuthenticationError("Invalid API key provided.")
