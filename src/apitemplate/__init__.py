"""Generic HTTP request helper.

Builds a request from a declarative :class:`RequestSpec`, sends it, and
normalizes the response into parsed data or an :class:`ApiError`.
"""

from ._api_template import api_template
from ._config import Config, ContentTypePatterns
from ._services import ApiTemplateService
from ._transport import HttpxResponse, HttpxTransport, Transport, TransportResponse
from ._utils import FormData, PreparedRequest, RequestSpec, prepare_request
from ._utils._content_type import classify_content_type
from ._utils._normalizer import get_error_message, make_api_error, parse_response
from .models import (
    ApiError,
    Blob,
    ContentTypeCategory,
    HttpMethod,
    HttpStatusError,
    OperationFailedError,
    ResponseParseError,
    ResponseType,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "ApiTemplateService",
    "Blob",
    "Config",
    "ContentTypeCategory",
    "ContentTypePatterns",
    "FormData",
    "HttpMethod",
    "HttpStatusError",
    "HttpxResponse",
    "HttpxTransport",
    "OperationFailedError",
    "PreparedRequest",
    "RequestSpec",
    "ResponseParseError",
    "ResponseType",
    "Transport",
    "TransportError",
    "TransportResponse",
    "ValidationError",
    "api_template",
    "classify_content_type",
    "get_error_message",
    "make_api_error",
    "parse_response",
    "prepare_request",
]
