from typing import Any, Optional

from ._config import Config
from ._services.api_template_service import ApiTemplateService
from ._transport import Transport
from ._utils._request_spec import RequestSpec


async def api_template(
    spec: Optional[RequestSpec] = None,
    *,
    config: Optional[Config] = None,
    transport: Optional[Transport] = None,
    **kwargs: Any,
) -> Any:
    """Send one API request and return its normalized result.

    Either pass a :class:`RequestSpec` or its fields as keyword arguments.

    Examples:
        ```python
        from apitemplate import api_template

        report = await api_template(
            base_url="https://api.example.com",
            endpoint="/reports/42",
            requires_auth=True,
            token=token,
            response_type="blob",
        )
        ```
    """
    if spec is None:
        spec = RequestSpec(**{"base_url": "", **kwargs})
    elif kwargs:
        raise TypeError("Pass either a RequestSpec or keyword arguments, not both")

    service = ApiTemplateService(config=config, transport=transport)
    return await service.request(spec)
