from dataclasses import dataclass
from typing import Optional


@dataclass
class Blob:
    """Binary response body together with its declared metadata.

    ``filename`` is taken from the ``Content-Disposition`` header when the
    server sends one.
    """

    content: bytes
    content_type: Optional[str] = None
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return (
            f"Blob(size={self.size}, "
            f"content_type={self.content_type!r}, "
            f"filename={self.filename!r})"
        )
