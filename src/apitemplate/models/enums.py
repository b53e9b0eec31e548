"""Enums shared by the request builder and the response normalizer."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods accepted by the request helper."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ContentTypeCategory(str, Enum):
    """Parse strategy selected for a successful response body."""

    JSON = "json"
    BLOB = "blob"
    TEXT = "text"
    ARRAY_BUFFER = "arrayBuffer"


class ResponseType(str, Enum):
    """Response type requested by the caller.

    ``AUTO`` defers to the response ``Content-Type`` header; every other
    member maps onto the :class:`ContentTypeCategory` of the same value.
    """

    AUTO = "auto"
    JSON = "json"
    BLOB = "blob"
    TEXT = "text"
    ARRAY_BUFFER = "arrayBuffer"

    def to_category(self) -> ContentTypeCategory:
        if self is ResponseType.AUTO:
            raise ValueError("ResponseType.AUTO has no fixed content type category")
        return ContentTypeCategory(self.value)
