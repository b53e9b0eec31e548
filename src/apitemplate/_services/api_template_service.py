from typing import Any, Optional

from .._config import Config
from .._transport import Transport, TransportResponse
from .._utils._content_type import (
    classify_content_type,
    get_content_type,
    matches_any,
)
from .._utils._files import FilePredicate, is_file_like
from .._utils._normalizer import get_error_message, make_api_error, parse_response
from .._utils._request_builder import prepare_request
from .._utils._request_spec import RequestSpec
from ..models.enums import ContentTypeCategory, ResponseType
from ..models.errors import HttpStatusError, ValidationError
from ._base_service import BaseService


class ApiTemplateService(BaseService):
    """Issues single API calls and normalizes their results.

    Each call builds its own headers and body, sends exactly one request and
    either returns the parsed body or raises an
    :class:`~apitemplate.models.errors.ApiError`. Nothing is retried and no
    state is kept between calls.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[Transport] = None,
        *,
        is_file: FilePredicate = is_file_like,
    ) -> None:
        super().__init__(config=config, transport=transport)
        self._is_file = is_file

    async def request(self, spec: RequestSpec) -> Any:
        """Send the request described by ``spec`` and return the parsed body.

        Args:
            spec (RequestSpec): The request to send.

        Returns:
            Any: Parsed JSON, text, bytes or a
            :class:`~apitemplate.models.blob.Blob`, depending on the response
            type requested or detected.

        Raises:
            ValidationError: If the base URL is empty, or authentication is
                required without a token. Raised before any network activity.
            TransportError: If no response could be obtained.
            HttpStatusError: If the server answers with a non-success status.
            OperationFailedError: If a successful JSON body carries the
                failure marker.
            ResponseParseError: If a successful JSON body cannot be decoded.

        Examples:
            ```python
            from apitemplate import ApiTemplateService, RequestSpec

            service = ApiTemplateService()

            user = await service.request(
                RequestSpec(
                    base_url="https://api.example.com",
                    endpoint="/users/me",
                    requires_auth=True,
                    token=token,
                )
            )
            ```
        """
        if not spec.base_url:
            raise ValidationError("Base URL not found")

        prepared = prepare_request(spec, is_file=self._is_file)

        response = await self.send_async(
            spec.method.value,
            spec.full_url,
            headers=prepared.headers,
            body=prepared.body,
        )

        if not response.is_success:
            error_data = await self._read_error_body(response)
            message = get_error_message(
                error_data,
                f"API error ({response.status_code})",
                self._config.error_message_fields,
            )
            raise make_api_error(
                message, response.status_code, error_data, HttpStatusError
            )

        category = self._resolve_category(spec, response)
        return await parse_response(response, category, self._config)

    def _resolve_category(
        self, spec: RequestSpec, response: TransportResponse
    ) -> ContentTypeCategory:
        if spec.response_type != ResponseType.AUTO:
            return spec.response_type.to_category()
        return classify_content_type(
            response.headers, self._config.content_type_patterns
        )

    async def _read_error_body(self, response: TransportResponse) -> Any:
        content_type = get_content_type(response.headers)
        try:
            if matches_any(content_type, self._config.content_type_patterns.json_):
                return await response.json()
            return await response.text()
        except Exception as e:
            self._logger.warning(
                f"Could not read error body of {response.status_code} response: {e}"
            )
            return None
