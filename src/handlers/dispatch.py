"""Method dispatch for decoded request envelopes."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import Callable, Awaitable

from src.state import RuntimeDeps, Session, RequestEnvelope, ResponseEnvelope
from src.errors import ModelError, SessionNotFoundError
from src.protocol.codec import error_response, success_response
from src.config.protocol import (
    ERROR_INTERNAL,
    METHOD_MODELS_LIST,
    ERROR_INVALID_PARAMS,
    METHOD_SESSION_CLOSE,
    METHOD_SESSION_CREATE,
    ERROR_METHOD_NOT_FOUND,
    METHOD_SESSION_GENERATE,
)

logger = logging.getLogger(__name__)

HandlerFn = Callable[[RuntimeDeps, str, dict[str, Any]], Awaitable[ResponseEnvelope]]


def _str_param(params: dict[str, Any], key: str) -> str | None:
    value = params.get(key)
    return value if isinstance(value, str) else None


def _missing(request_id: str, key: str) -> ResponseEnvelope:
    return error_response(request_id, ERROR_INVALID_PARAMS, f"Invalid params: missing {key}")


async def _run_model(session: Session, prompt: str) -> str:
    # Models are synchronous; keep them off the event loop.
    try:
        response = await asyncio.to_thread(session.handler.generate, prompt, tuple(session.context))
    except ModelError:
        raise
    except Exception as exc:
        raise ModelError(str(exc)) from exc
    if not isinstance(response, str):
        raise ModelError(f"model {session.model!r} returned {type(response).__name__}, expected str")
    session.record_turn(prompt, response)
    return response


async def _handle_session_create(
    runtime_deps: RuntimeDeps,
    request_id: str,
    params: dict[str, Any],
) -> ResponseEnvelope:
    model = _str_param(params, "model")
    if model is None:
        return _missing(request_id, "model")

    handler = runtime_deps.models.lookup(model)
    if handler is None:
        return error_response(request_id, ERROR_INVALID_PARAMS, f"Model not found: {model}")

    session_id = await runtime_deps.sessions.create(model, handler)
    logger.info("session.create session_id=%s model=%s. Sessions: %s", session_id, model, runtime_deps.sessions.count())
    return success_response(request_id, {"session_id": session_id})


async def _handle_session_generate(
    runtime_deps: RuntimeDeps,
    request_id: str,
    params: dict[str, Any],
) -> ResponseEnvelope:
    session_id = _str_param(params, "session_id")
    if session_id is None:
        return _missing(request_id, "session_id")
    prompt = _str_param(params, "prompt")
    if prompt is None:
        return _missing(request_id, "prompt")

    async def _generate(session: Session) -> str:
        return await _run_model(session, prompt)

    try:
        response = await runtime_deps.sessions.get_and_apply(session_id, _generate)
    except SessionNotFoundError as exc:
        return error_response(request_id, ERROR_INVALID_PARAMS, str(exc))
    except ModelError as exc:
        logger.warning("session.generate failed session_id=%s: %s", session_id, exc)
        return error_response(request_id, ERROR_INTERNAL, f"Model error: {exc}")
    return success_response(request_id, {"response": response})


async def _handle_session_close(
    runtime_deps: RuntimeDeps,
    request_id: str,
    params: dict[str, Any],
) -> ResponseEnvelope:
    session_id = _str_param(params, "session_id")
    if session_id is None:
        return _missing(request_id, "session_id")
    try:
        await runtime_deps.sessions.close(session_id)
    except SessionNotFoundError as exc:
        return error_response(request_id, ERROR_INVALID_PARAMS, str(exc))
    logger.info("session.close session_id=%s. Sessions: %s", session_id, runtime_deps.sessions.count())
    return success_response(request_id, {"success": True})


async def _handle_models_list(
    runtime_deps: RuntimeDeps,
    request_id: str,
    _params: dict[str, Any],
) -> ResponseEnvelope:
    return success_response(request_id, {"models": runtime_deps.models.names()})


HANDLERS: dict[str, HandlerFn] = {
    METHOD_SESSION_CREATE: _handle_session_create,
    METHOD_SESSION_GENERATE: _handle_session_generate,
    METHOD_SESSION_CLOSE: _handle_session_close,
    METHOD_MODELS_LIST: _handle_models_list,
}


async def dispatch(runtime_deps: RuntimeDeps, request: RequestEnvelope) -> ResponseEnvelope:
    """Route one request to its method handler. Always returns exactly one envelope."""
    handler = HANDLERS.get(request.method)
    if handler is None:
        return error_response(request.id, ERROR_METHOD_NOT_FOUND, f"Method not found: {request.method}")

    params = request.params if isinstance(request.params, dict) else {}
    try:
        return await handler(runtime_deps, request.id, params)
    except Exception as exc:
        logger.exception("method %s failed unexpectedly", request.method)
        return error_response(request.id, ERROR_INTERNAL, f"Internal error: {exc}")


__all__ = ["HANDLERS", "dispatch"]
