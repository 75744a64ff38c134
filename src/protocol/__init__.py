"""Wire protocol: envelope codec and connection framing."""

from .codec import decode_request, error_response, encode_response, success_response
from .framing import extract_body, read_request, frame_response

__all__ = [
    "decode_request",
    "encode_response",
    "error_response",
    "extract_body",
    "frame_response",
    "read_request",
    "success_response",
]
