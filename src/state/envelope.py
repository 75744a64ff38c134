"""Request/response envelopes exchanged over one connection."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from src.config.protocol import KEY_ID, KEY_CODE, KEY_ERROR, KEY_RESULT, KEY_MESSAGE


@dataclass(frozen=True, slots=True)
class RequestEnvelope:
    id: str
    method: str
    params: Any = None


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {KEY_CODE: self.code, KEY_MESSAGE: self.message}


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    id: str
    result: Any = None
    error: ErrorInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        # Both result and error are always serialized; the unused one is null.
        return {
            KEY_ID: self.id,
            KEY_RESULT: self.result,
            KEY_ERROR: self.error.to_dict() if self.error is not None else None,
        }


__all__ = ["ErrorInfo", "RequestEnvelope", "ResponseEnvelope"]
