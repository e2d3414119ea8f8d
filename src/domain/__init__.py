"""Domain layer: errors, constants and schemas."""

from .errors import ErrorCodes, RequestHandlingError
from .schemas import HelloData

__all__ = [
    "ErrorCodes",
    "RequestHandlingError",
    "HelloData",
]
