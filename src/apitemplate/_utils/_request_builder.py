import dataclasses
import json
import os
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterator, Optional
from urllib.parse import unquote, urlparse

from pydantic import BaseModel

from ..models.blob import Blob
from ..models.enums import HttpMethod
from ..models.errors import ValidationError
from ._files import FilePredicate, is_file_like, is_file_reference
from ._request_spec import PreparedRequest, RequestSpec
from .constants import CONTENT_TYPE_JSON, HEADER_AUTHORIZATION, HEADER_CONTENT_TYPE


class FormData:
    """Ordered multipart form container.

    Keeps every appended entry, so a key appended twice is sent twice.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, Any]] = []

    def append(self, key: str, value: Any) -> None:
        self._entries.append((key, value))

    def get_all(self, key: str) -> list[Any]:
        return [value for name, value in self._entries if name == key]

    def keys(self) -> list[str]:
        return [name for name, _ in self._entries]

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormData):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"FormData({self._entries!r})"

    def to_httpx_files(self) -> list[tuple[str, Any]]:
        """Render the entries, in order, as the ``files=`` argument of httpx.

        String entries become plain form fields; file-like entries become
        file parts.
        """
        files: list[tuple[str, Any]] = []
        for key, value in self._entries:
            if isinstance(value, str):
                files.append((key, (None, value)))
            elif isinstance(value, Blob):
                files.append(
                    (key, (value.filename or key, value.content, value.content_type))
                )
            elif isinstance(value, (bytearray, memoryview)):
                files.append((key, (key, bytes(value))))
            elif isinstance(value, bytes):
                files.append((key, (key, value)))
            elif is_file_reference(value):
                files.append((key, _read_file_reference(value)))
            else:
                files.append((key, value))
        return files


def _read_file_reference(value: Any) -> tuple[str, bytes, Optional[str]]:
    def field(name: str) -> Any:
        if isinstance(value, Mapping):
            return value.get(name)
        return getattr(value, name, None)

    uri: str = field("uri")
    parsed = urlparse(uri)
    path = unquote(parsed.path) if parsed.scheme == "file" else uri
    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise ValidationError(f"Cannot read file reference '{uri}': {e}") from e
    filename = field("name") or os.path.basename(path)
    return filename, content, field("type")


def encode_empty_multipart() -> tuple[bytes, str]:
    """Encode a multipart body without any parts.

    Returns:
        The body (the closing boundary only) and its ``Content-Type`` value.
    """
    boundary = uuid.uuid4().hex
    body = f"--{boundary}--\r\n".encode("utf-8")
    return body, f"multipart/form-data; boundary={boundary}"


def to_json(value: Any) -> str:
    """Serialize a value the way JSON bodies and form fields are sent."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _is_plain_object(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, BaseModel)) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def _to_form_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append_value(
    form: FormData, key: str, value: Any, is_file: FilePredicate
) -> None:
    if value is None:
        return
    if is_file(value):
        form.append(key, value)
    elif _is_plain_object(value):
        form.append(key, to_json(_to_jsonable(value)))
    else:
        form.append(key, _to_form_string(value))


def build_form_data(
    payload: Optional[Mapping[str, Any]], is_file: FilePredicate = is_file_like
) -> FormData:
    """Encode a payload as multipart form entries.

    ``None`` values are skipped, lists and non-file tuples are expanded into
    one entry per element, file-like values are kept as-is, mappings,
    dataclasses and pydantic models are sent as their JSON string and other
    scalars as their string form.
    """
    form = FormData()
    for key, value in (payload or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)) and not is_file(value):
            for item in value:
                _append_value(form, key, item, is_file)
        else:
            _append_value(form, key, value, is_file)
    return form


def prepare_request(
    spec: RequestSpec, *, is_file: FilePredicate = is_file_like
) -> PreparedRequest:
    """Build the headers and body for a request.

    Args:
        spec: The request to prepare.
        is_file: Predicate deciding which multipart values are sent as files.

    Returns:
        PreparedRequest: Headers and body. GET requests never carry a body.

    Raises:
        ValidationError: If authentication is required and no token is set,
            or if the payload cannot be serialized as JSON.
    """
    headers: dict[str, str] = {}

    if not spec.is_form_data:
        headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

    if spec.requires_auth:
        if not spec.token:
            raise ValidationError("Token is required but not available")
        headers[HEADER_AUTHORIZATION] = f"Bearer {spec.token}"

    body: Any = None
    if spec.method != HttpMethod.GET:
        try:
            if spec.is_form_data:
                body = build_form_data(spec.payload, is_file)
            else:
                body = to_json(spec.payload if spec.payload is not None else {})
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Payload is not JSON serializable: {e}") from e

    return PreparedRequest(headers=headers, body=body)
