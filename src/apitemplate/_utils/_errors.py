from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx

from ..models.errors import TransportError


@asynccontextmanager
async def handle_transport_errors(
    method: str, url: str
) -> AsyncGenerator[None, None]:
    """Context manager converting transport failures into :class:`TransportError`.

    Wraps the network call so that connection, timeout and protocol errors
    raised by httpx reach the caller as the same error type as every other
    failure path. The original exception is kept as ``__cause__``.
    """
    try:
        yield
    except httpx.RequestError as e:
        raise TransportError(
            f"Request {method} {url} failed: {type(e).__name__}: {e}"
        ) from e
