"""Per-connection orchestration: frame, decode, dispatch, reply, close."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from src.state import RuntimeDeps
from src.errors import DecodeError, MissingBodyError, MethodNotAllowedError
from src.protocol.codec import decode_request, error_response, encode_response
from src.protocol.framing import extract_body, read_request, frame_response
from src.config.protocol import (
    STATUS_OK,
    ERROR_PARSE,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT,
    TEXT_MISSING_BODY,
    STATUS_BAD_REQUEST,
    UNKNOWN_REQUEST_ID,
    TEXT_METHOD_NOT_ALLOWED,
    TEXT_SERVER_AT_CAPACITY,
    STATUS_METHOD_NOT_ALLOWED,
    STATUS_SERVICE_UNAVAILABLE,
)

from .dispatch import dispatch

logger = logging.getLogger(__name__)


def _text_reply(status: str, text: str) -> bytes:
    return frame_response(status, CONTENT_TYPE_TEXT, text.encode("utf-8"))


async def build_reply(data: bytes, runtime_deps: RuntimeDeps) -> bytes:
    """Turn the bytes of one framed request into the framed reply."""
    try:
        body = extract_body(data)
    except MethodNotAllowedError as exc:
        logger.debug("rejecting request line %r", str(exc))
        return _text_reply(STATUS_METHOD_NOT_ALLOWED, TEXT_METHOD_NOT_ALLOWED)
    except MissingBodyError:
        return _text_reply(STATUS_BAD_REQUEST, TEXT_MISSING_BODY)

    try:
        request = decode_request(body)
    except DecodeError as exc:
        response = error_response(UNKNOWN_REQUEST_ID, ERROR_PARSE, f"Parse error: {exc}")
        return frame_response(STATUS_BAD_REQUEST, CONTENT_TYPE_JSON, encode_response(response))

    response = await dispatch(runtime_deps, request)
    return frame_response(STATUS_OK, CONTENT_TYPE_JSON, encode_response(response))


async def _write(writer: asyncio.StreamWriter, payload: bytes) -> None:
    writer.write(payload)
    await writer.drain()


async def handle_connection(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    runtime_deps: RuntimeDeps,
) -> None:
    peer = str(writer.get_extra_info("peername") or "unknown")
    connections = runtime_deps.connections
    limits = runtime_deps.settings.limits
    admitted = False
    try:
        if not await connections.connect(writer):
            logger.warning("rejecting %s: server at capacity", peer)
            await _write(writer, _text_reply(STATUS_SERVICE_UNAVAILABLE, TEXT_SERVER_AT_CAPACITY))
            return
        admitted = True
        logger.info("client connected peer=%s. Active: %s", peer, connections.get_connection_count())

        data = await read_request(reader, limits.max_request_bytes, timeout_s=limits.request_read_timeout_s)
        if not data:
            logger.debug("peer %s closed before sending a request", peer)
            return

        await _write(writer, await build_reply(data, runtime_deps))
    except TimeoutError:
        logger.warning("no request from %s within %.1fs; dropping", peer, limits.request_read_timeout_s)
    except OSError as exc:
        logger.warning("connection I/O failed peer=%s: %s", peer, exc)
    finally:
        if admitted:
            with contextlib.suppress(Exception):
                await connections.disconnect(writer)
            logger.info("client disconnected peer=%s. Active: %s", peer, connections.get_connection_count())
        writer.close()
        with contextlib.suppress(Exception):
            await writer.wait_closed()


__all__ = ["build_reply", "handle_connection"]
