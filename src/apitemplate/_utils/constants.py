# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_DISPOSITION = "content-disposition"

CONTENT_TYPE_JSON = "application/json"

# Content-type rules, checked in the order json, blob, text
DEFAULT_JSON_PATTERNS = ("application/json", "+json")
DEFAULT_BLOB_PATTERNS = (
    "application/pdf",
    "application/octet-stream",
    "application/zip",
    "application/vnd",
    "image/",
)
DEFAULT_TEXT_PATTERNS = ("text/", "application/xml", "text/xml")

# Error payload fields probed for a message, in priority order
DEFAULT_ERROR_MESSAGE_FIELDS = ("message", "error", "detail", "msg", "title")

# Marker a successful JSON body uses to report a failed operation
DEFAULT_FAILURE_MARKER_FIELD = "type"
DEFAULT_FAILURE_MARKER_VALUE = "FALSE"

OPERATION_FAILED_MESSAGE = "Operation failed"

LOGGER_NAME = "apitemplate"
