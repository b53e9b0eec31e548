from collections.abc import Mapping
from typing import Iterable, Optional

from .._config import ContentTypePatterns
from ..models.enums import ContentTypeCategory

_DEFAULT_PATTERNS = ContentTypePatterns()


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Look up a header by name, ignoring case.

    Works for plain dicts as well as case-insensitive mappings such as
    ``httpx.Headers``.
    """
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def get_content_type(headers: Mapping[str, str]) -> str:
    return (get_header(headers, "content-type") or "").lower()


def matches_any(content_type: str, patterns: Iterable[str]) -> bool:
    for pattern in patterns:
        pattern = pattern.lower()
        if pattern.endswith("/"):
            if content_type.startswith(pattern):
                return True
        elif pattern in content_type:
            return True
    return False


def classify_content_type(
    headers: Mapping[str, str], patterns: Optional[ContentTypePatterns] = None
) -> ContentTypeCategory:
    """Pick the parse strategy for a response from its ``Content-Type``.

    Categories are tried in the order json, blob, text; the first one with a
    matching pattern wins. Anything unmatched, including a missing header, is
    read as text.
    """
    patterns = patterns or _DEFAULT_PATTERNS
    content_type = get_content_type(headers)

    if matches_any(content_type, patterns.json_):
        return ContentTypeCategory.JSON
    if matches_any(content_type, patterns.blob):
        return ContentTypeCategory.BLOB
    if matches_any(content_type, patterns.text):
        return ContentTypeCategory.TEXT

    return ContentTypeCategory.TEXT
