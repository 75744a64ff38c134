"""Admission control and request size/time limits."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_MAX_REQUEST_BYTES = "MAX_REQUEST_BYTES"
ENV_REQUEST_READ_TIMEOUT_S = "REQUEST_READ_TIMEOUT_S"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100

# A request is taken from a single read of at most this many bytes.
DEFAULT_MAX_REQUEST_BYTES = 8192

# Peers that send nothing for this long are dropped without a response. 0 disables.
DEFAULT_REQUEST_READ_TIMEOUT_S = 30.0

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_MAX_REQUEST_BYTES",
    "DEFAULT_REQUEST_READ_TIMEOUT_S",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_MAX_REQUEST_BYTES",
    "ENV_REQUEST_READ_TIMEOUT_S",
]
