"""Minimal one-request-per-connection framing.

A request is a header block terminated by an empty line followed by the body.
Only the first line's verb is inspected; the remaining header lines are
ignored. The body is whatever follows the terminator in the bytes read.
"""

from __future__ import annotations

import asyncio

from src.errors import MissingBodyError, MethodNotAllowedError
from src.config.protocol import (
    HTTP_VERSION,
    ACCEPTED_VERB,
    HEADER_TERMINATOR,
)


async def read_request(reader: asyncio.StreamReader, limit: int, *, timeout_s: float = 0.0) -> bytes:
    """Single read of up to ``limit`` bytes. Empty bytes mean the peer closed.

    Raises:
        TimeoutError: If ``timeout_s`` > 0 and nothing arrives in time.
    """
    if timeout_s > 0:
        return await asyncio.wait_for(reader.read(limit), timeout=timeout_s)
    return await reader.read(limit)


def extract_body(data: bytes) -> bytes:
    """Return the body of a framed request.

    Raises:
        MethodNotAllowedError: If the first line does not start with the accepted verb.
        MissingBodyError: If no header terminator is present.
    """
    first_line = data.split(b"\n", 1)[0].decode("utf-8", errors="replace")
    tokens = first_line.split()
    if not tokens or tokens[0] != ACCEPTED_VERB:
        raise MethodNotAllowedError(first_line.strip())

    head, sep, body = data.partition(HEADER_TERMINATOR)
    if not sep:
        raise MissingBodyError(f"no header terminator in {len(head)} bytes")
    return body


def frame_response(status: str, content_type: str, body: bytes) -> bytes:
    head = (
        f"{HTTP_VERSION} {status}\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {len(body)}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return head.encode("ascii") + body


__all__ = ["extract_body", "frame_response", "read_request"]
