"""Request handling: admission, dispatch and per-connection flow."""

from .dispatch import HANDLERS, dispatch
from .connection import build_reply, handle_connection
from .connections import ConnectionManager

__all__ = ["HANDLERS", "ConnectionManager", "build_reply", "dispatch", "handle_connection"]
