"""Configuration module exports (env names and defaults only)."""

from .server import (
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
)
from .limits import (
    ENV_MAX_REQUEST_BYTES,
    DEFAULT_MAX_REQUEST_BYTES,
    ENV_REQUEST_READ_TIMEOUT_S,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_REQUEST_READ_TIMEOUT_S,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_MAX_REQUEST_BYTES",
    "DEFAULT_REQUEST_READ_TIMEOUT_S",
    "DEFAULT_SERVER_HOST",
    "DEFAULT_SERVER_PORT",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_MAX_REQUEST_BYTES",
    "ENV_REQUEST_READ_TIMEOUT_S",
    "ENV_SERVER_HOST",
    "ENV_SERVER_PORT",
]
