"""Wire protocol constants: framing, envelope keys and error codes."""

from __future__ import annotations

# Framing
ACCEPTED_VERB = "POST"
HEADER_TERMINATOR = b"\r\n\r\n"
HTTP_VERSION = "HTTP/1.1"

STATUS_OK = "200 OK"
STATUS_BAD_REQUEST = "400 Bad Request"
STATUS_METHOD_NOT_ALLOWED = "405 Method Not Allowed"
STATUS_SERVICE_UNAVAILABLE = "503 Service Unavailable"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"

TEXT_METHOD_NOT_ALLOWED = "Use POST requests"
TEXT_MISSING_BODY = "Missing request body"
TEXT_SERVER_AT_CAPACITY = "Server at capacity"

# Envelope keys
KEY_ID = "id"
KEY_METHOD = "method"
KEY_PARAMS = "params"
KEY_RESULT = "result"
KEY_ERROR = "error"
KEY_CODE = "code"
KEY_MESSAGE = "message"

# Response id used when no request id could be recovered.
UNKNOWN_REQUEST_ID = "error"

# Error codes (ErrorInfo.code values)
ERROR_PARSE = -32700
ERROR_METHOD_NOT_FOUND = -32601
ERROR_INVALID_PARAMS = -32602
ERROR_INTERNAL = -32603

# Methods
METHOD_SESSION_CREATE = "session.create"
METHOD_SESSION_GENERATE = "session.generate"
METHOD_SESSION_CLOSE = "session.close"
METHOD_MODELS_LIST = "models.list"

__all__ = [
    "ACCEPTED_VERB",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_TEXT",
    "ERROR_INTERNAL",
    "ERROR_INVALID_PARAMS",
    "ERROR_METHOD_NOT_FOUND",
    "ERROR_PARSE",
    "HEADER_TERMINATOR",
    "HTTP_VERSION",
    "KEY_CODE",
    "KEY_ERROR",
    "KEY_ID",
    "KEY_MESSAGE",
    "KEY_METHOD",
    "KEY_PARAMS",
    "KEY_RESULT",
    "METHOD_MODELS_LIST",
    "METHOD_SESSION_CLOSE",
    "METHOD_SESSION_CREATE",
    "METHOD_SESSION_GENERATE",
    "STATUS_BAD_REQUEST",
    "STATUS_METHOD_NOT_ALLOWED",
    "STATUS_OK",
    "STATUS_SERVICE_UNAVAILABLE",
    "TEXT_METHOD_NOT_ALLOWED",
    "TEXT_MISSING_BODY",
    "TEXT_SERVER_AT_CAPACITY",
    "UNKNOWN_REQUEST_ID",
]
