import json
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .._config import Config
from ..models.enums import ContentTypeCategory
from ..models.errors import ApiError, OperationFailedError, ResponseParseError
from ._content_type import get_header
from .constants import (
    DEFAULT_ERROR_MESSAGE_FIELDS,
    HEADER_CONTENT_DISPOSITION,
    OPERATION_FAILED_MESSAGE,
)

if TYPE_CHECKING:
    from .._transport import TransportResponse

_FILENAME_PATTERN = re.compile(r'filename="([^"]+)"', re.IGNORECASE)


def get_error_message(
    error_data: Any,
    fallback_message: str,
    fields: Optional[Sequence[str]] = None,
) -> str:
    """Extract a human readable message from an arbitrary error payload.

    Strings are returned as-is. For mappings the first non-empty value among
    ``fields`` (``message``, ``error``, ``detail``, ``msg``, ``title`` by
    default) is used. Anything else falls back to ``fallback_message``.
    """
    if not error_data:
        return fallback_message
    if isinstance(error_data, str):
        return error_data
    if isinstance(error_data, Mapping):
        for name in fields if fields is not None else DEFAULT_ERROR_MESSAGE_FIELDS:
            value = error_data.get(name)
            if value:
                return value if isinstance(value, str) else str(value)
    return fallback_message


def make_api_error(
    message: str, status: int, data: Any, error_type: type[ApiError] = ApiError
) -> ApiError:
    return error_type(message, status, data)


def get_filename(headers: Mapping[str, str]) -> Optional[str]:
    content_disposition = get_header(headers, HEADER_CONTENT_DISPOSITION)
    if not content_disposition:
        return None
    match = _FILENAME_PATTERN.search(content_disposition)
    return match.group(1) if match else None


def raise_if_operation_failed(data: Any, config: Config) -> None:
    if (
        isinstance(data, Mapping)
        and data.get(config.failure_marker_field) == config.failure_marker_value
    ):
        message = get_error_message(
            data, OPERATION_FAILED_MESSAGE, config.error_message_fields
        )
        raise OperationFailedError(message, data)


async def _read_json(response: "TransportResponse") -> Any:
    try:
        return await response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raw = await response.text()
        raise ResponseParseError(
            f"Invalid JSON response: {e}", response.status_code, raw
        ) from e


async def parse_response(
    response: "TransportResponse",
    category: ContentTypeCategory,
    config: Optional[Config] = None,
) -> Any:
    """Read a successful response body using the given parse strategy.

    Raises:
        OperationFailedError: If a JSON body carries the failure marker.
        ResponseParseError: If a JSON body cannot be decoded.
    """
    config = config or Config()

    if category == ContentTypeCategory.JSON:
        data = await _read_json(response)
        raise_if_operation_failed(data, config)
        return data

    if category == ContentTypeCategory.BLOB:
        filename = get_filename(response.headers)
        read_blob = getattr(response, "blob", None)
        if callable(read_blob):
            blob = await read_blob()
            blob.filename = filename
            return blob
        read_bytes = getattr(response, "read_bytes", None)
        if callable(read_bytes):
            return await read_bytes()
        return await response.text()

    if category == ContentTypeCategory.ARRAY_BUFFER:
        read_bytes = getattr(response, "read_bytes", None)
        if callable(read_bytes):
            return await read_bytes()
        return await response.text()

    return await response.text()
