from typing import Any

OPERATION_FAILED_STATUS = 400


class ApiError(Exception):
    """Uniform error raised by every failure path of a request.

    Attributes:
        message: Human readable message extracted from the error payload.
        status: HTTP status code, ``400`` for operation failures reported in
            a successful body, ``0`` when no response was received.
        data: Raw error payload (parsed JSON, text or ``None``).
    """

    def __init__(self, message: str, status: int = 0, data: Any = None):
        self.message = message
        self.status = status
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status={self.status!r}, data={self.data!r})"
        )


class ValidationError(ApiError):
    """Raised before any network activity when the request arguments are invalid."""

    def __init__(self, message: str):
        super().__init__(message, status=0, data=None)


class TransportError(ApiError):
    """Raised when the transport could not produce a response at all."""

    def __init__(self, message: str):
        super().__init__(message, status=0, data=None)


class HttpStatusError(ApiError):
    """Raised when the server answers with a non-success status code."""


class OperationFailedError(ApiError):
    """Raised when a successful JSON body carries the failure marker.

    The status is always ``400`` and ``data`` holds the full parsed body.
    """

    def __init__(self, message: str, data: Any = None):
        super().__init__(message, status=OPERATION_FAILED_STATUS, data=data)


class ResponseParseError(ApiError):
    """Raised when a successful response body cannot be decoded."""
