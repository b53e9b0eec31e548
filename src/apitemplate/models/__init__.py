from .blob import Blob
from .enums import ContentTypeCategory, HttpMethod, ResponseType
from .errors import (
    ApiError,
    HttpStatusError,
    OperationFailedError,
    ResponseParseError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "Blob",
    "ContentTypeCategory",
    "HttpMethod",
    "HttpStatusError",
    "OperationFailedError",
    "ResponseParseError",
    "ResponseType",
    "TransportError",
    "ValidationError",
]
