from ._files import is_file_like, is_file_reference
from ._request_builder import FormData, build_form_data, prepare_request
from ._request_spec import PreparedRequest, RequestSpec

__all__ = [
    "FormData",
    "PreparedRequest",
    "RequestSpec",
    "build_form_data",
    "is_file_like",
    "is_file_reference",
    "prepare_request",
]
