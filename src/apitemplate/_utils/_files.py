"""Recognition of file-like values inside multipart payloads."""

import io
from typing import Any, Callable, Mapping

from ..models.blob import Blob

FilePredicate = Callable[[Any], bool]


def is_file_reference(value: Any) -> bool:
    """Check for a mobile-style file reference: an object with a string ``uri``."""
    if isinstance(value, Mapping):
        return isinstance(value.get("uri"), str)
    return isinstance(getattr(value, "uri", None), str)


def is_file_like(value: Any) -> bool:
    """Default predicate deciding whether a payload value is sent as a file.

    Recognized values:
        - raw binary (``bytes``, ``bytearray``, ``memoryview``) and :class:`Blob`
        - binary streams (``io.IOBase`` or anything with a callable ``read``)
        - httpx file tuples ``(filename, content[, content_type[, headers]])``
        - file references exposing a string ``uri`` field
    """
    if isinstance(value, (bytes, bytearray, memoryview, Blob)):
        return True
    if isinstance(value, io.IOBase) or callable(getattr(value, "read", None)):
        return True
    if _is_file_tuple(value):
        return True
    return is_file_reference(value)


def _is_file_tuple(value: Any) -> bool:
    if not isinstance(value, tuple) or not 2 <= len(value) <= 4:
        return False
    filename, content = value[0], value[1]
    if filename is not None and not isinstance(filename, str):
        return False
    return isinstance(content, (bytes, bytearray, io.IOBase)) or callable(
        getattr(content, "read", None)
    )
