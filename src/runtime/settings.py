"""Environment parsing for runtime settings.

Names and defaults live in `src/config/*`; this module resolves them into the
frozen dataclasses in `src/state/settings.py`. Unparseable values fall back to
their defaults.
"""

from __future__ import annotations

import os

from src.state.settings import AppSettings, ModelSettings, LimitsSettings, ServerSettings
from src.config.models import ENV_ENABLED_MODELS, DEFAULT_ENABLED_MODELS
from src.config.server import (
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
)
from src.config.limits import (
    ENV_MAX_REQUEST_BYTES,
    DEFAULT_MAX_REQUEST_BYTES,
    ENV_REQUEST_READ_TIMEOUT_S,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_REQUEST_READ_TIMEOUT_S,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=_str_env(ENV_SERVER_HOST, DEFAULT_SERVER_HOST),
        port=_int_env(ENV_SERVER_PORT, DEFAULT_SERVER_PORT),
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
    max_request_bytes = _int_env(ENV_MAX_REQUEST_BYTES, DEFAULT_MAX_REQUEST_BYTES)
    if max_request_bytes <= 0:
        max_request_bytes = DEFAULT_MAX_REQUEST_BYTES
    read_timeout = _float_env(ENV_REQUEST_READ_TIMEOUT_S, DEFAULT_REQUEST_READ_TIMEOUT_S)

    return LimitsSettings(
        max_concurrent_connections=max(1, max_connections),
        max_request_bytes=max_request_bytes,
        request_read_timeout_s=max(0.0, read_timeout),
    )


def _load_model_settings() -> ModelSettings:
    return ModelSettings(enabled_models=_list_env(ENV_ENABLED_MODELS, DEFAULT_ENABLED_MODELS))


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        limits=_load_limits_settings(),
        models=_load_model_settings(),
    )


__all__ = ["load_settings"]
