from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import (
    DEFAULT_BLOB_PATTERNS,
    DEFAULT_ERROR_MESSAGE_FIELDS,
    DEFAULT_FAILURE_MARKER_FIELD,
    DEFAULT_FAILURE_MARKER_VALUE,
    DEFAULT_JSON_PATTERNS,
    DEFAULT_TEXT_PATTERNS,
)


class ContentTypePatterns(BaseModel):
    """Content-type match patterns per parse strategy.

    A pattern ending in ``/`` matches by prefix (``image/`` matches
    ``image/png``); any other pattern matches anywhere in the header value.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    json_: tuple[str, ...] = Field(default=DEFAULT_JSON_PATTERNS, alias="json")
    blob: tuple[str, ...] = DEFAULT_BLOB_PATTERNS
    text: tuple[str, ...] = DEFAULT_TEXT_PATTERNS


class Config(BaseModel):
    content_type_patterns: ContentTypePatterns = Field(
        default_factory=ContentTypePatterns
    )
    error_message_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ERROR_MESSAGE_FIELDS)
    )
    failure_marker_field: str = DEFAULT_FAILURE_MARKER_FIELD
    failure_marker_value: str = DEFAULT_FAILURE_MARKER_VALUE
    timeout: Optional[float] = None
    default_headers: dict[str, str] = Field(default_factory=dict)
