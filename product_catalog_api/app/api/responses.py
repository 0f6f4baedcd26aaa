"""
Rendering of service results as HTTP responses.

Successful results are wrapped in the success envelope
``{"success": true, "data": ..., ...}``; failures are rendered with the
same error envelope used by the exception handlers.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..core.errors import error_response
from ..schemas.product import ProductPage, SearchResults
from ..services.result import Err, Result


logger = logging.getLogger(__name__)


def render(
    result: Result[Any],
    status_code: int = status.HTTP_200_OK,
    message: Optional[str] = None,
) -> JSONResponse:
    """Turn an ``Ok``/``Err`` into a JSON response.

    Paged results already carry their ``data`` and ``pagination`` (and
    ``searchTerm``), so their fields are merged into the envelope.  Any
    other value becomes the envelope's ``data``.
    """
    if isinstance(result, Err):
        logger.warning("%s: %s", type(result.error).__name__, result.error.message)
        return error_response(result.error)

    content: Dict[str, Any] = {"success": True}
    if message:
        content["message"] = message
    value = result.value
    if isinstance(value, (ProductPage, SearchResults)):
        content.update(value.model_dump(by_alias=True))
    elif isinstance(value, BaseModel):
        content["data"] = value.model_dump(by_alias=True)
    else:
        content["data"] = value
    return JSONResponse(status_code=status_code, content=content)
