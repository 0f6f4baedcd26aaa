"""
Explicit success/failure values returned by service operations.

Service methods return ``Ok(value)`` or ``Err(error)`` instead of
raising, which keeps the business logic free of HTTP concerns.  The
API layer inspects the variant and renders either a success envelope
or an error envelope.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ..core.errors import ApiError


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: ApiError


Result = Union[Ok[T], Err]
