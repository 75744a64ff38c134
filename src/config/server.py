"""Listener configuration."""

from __future__ import annotations

ENV_SERVER_HOST = "SERVER_HOST"
ENV_SERVER_PORT = "SERVER_PORT"

DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8080

__all__ = [
    "DEFAULT_SERVER_HOST",
    "DEFAULT_SERVER_PORT",
    "ENV_SERVER_HOST",
    "ENV_SERVER_PORT",
]
