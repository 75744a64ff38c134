"""Request/response envelope codec."""

from __future__ import annotations

from typing import Any

import orjson

from src.errors import DecodeError
from src.state.envelope import ErrorInfo, RequestEnvelope, ResponseEnvelope
from src.config.protocol import KEY_ID, KEY_METHOD, KEY_PARAMS


def decode_request(data: bytes) -> RequestEnvelope:
    """Parse one request envelope.

    ``id`` and ``method`` must be strings. ``params`` must be present but may be
    any JSON value, ``null`` included. Unknown keys are ignored.

    Raises:
        DecodeError: If the body is not JSON or does not have the envelope shape.
    """
    try:
        msg = orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        raise DecodeError(str(exc)) from exc

    if not isinstance(msg, dict):
        raise DecodeError("request must be a JSON object")

    request_id = msg.get(KEY_ID)
    if not isinstance(request_id, str):
        raise DecodeError(f"missing or non-string field `{KEY_ID}`")

    method = msg.get(KEY_METHOD)
    if not isinstance(method, str):
        raise DecodeError(f"missing or non-string field `{KEY_METHOD}`")

    if KEY_PARAMS not in msg:
        raise DecodeError(f"missing field `{KEY_PARAMS}`")

    return RequestEnvelope(id=request_id, method=method, params=msg[KEY_PARAMS])


def encode_response(response: ResponseEnvelope) -> bytes:
    return orjson.dumps(response.to_dict())


def success_response(request_id: str, result: Any) -> ResponseEnvelope:
    return ResponseEnvelope(id=request_id, result=result, error=None)


def error_response(request_id: str, code: int, message: str) -> ResponseEnvelope:
    return ResponseEnvelope(id=request_id, result=None, error=ErrorInfo(code=code, message=message))


__all__ = ["decode_request", "encode_response", "error_response", "success_response"]
