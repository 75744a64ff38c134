"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    max_request_bytes: int
    request_read_timeout_s: float


@dataclass(frozen=True, slots=True)
class ModelSettings:
    enabled_models: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    limits: LimitsSettings
    models: ModelSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ModelSettings",
    "ServerSettings",
]
