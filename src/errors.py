"""Shared error types for the session dispatch server."""

from __future__ import annotations


class DecodeError(ValueError):
    """Raised when a request body is not a valid request envelope."""


class FramingError(Exception):
    """Raised when one connection's bytes cannot be framed as a request."""


class MethodNotAllowedError(FramingError):
    """The first line does not carry the accepted submission verb."""


class MissingBodyError(FramingError):
    """No header terminator was found in the bytes read."""


class SessionNotFoundError(LookupError):
    """Raised by the session store for ids it does not hold."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class ModelError(Exception):
    """Raised by model handlers when they cannot produce a response."""


__all__ = [
    "DecodeError",
    "FramingError",
    "MethodNotAllowedError",
    "MissingBodyError",
    "ModelError",
    "SessionNotFoundError",
]
