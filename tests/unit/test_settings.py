from __future__ import annotations

import pytest

from src.runtime.settings import load_settings
from src.runtime.dependencies import build_runtime_deps

from tests.unit.fakes import make_settings


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SERVER_HOST",
        "SERVER_PORT",
        "MAX_REQUEST_BYTES",
        "REQUEST_READ_TIMEOUT_S",
        "MAX_CONCURRENT_CONNECTIONS",
        "ENABLED_MODELS",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.server.host == "127.0.0.1"
    assert settings.server.port == 8080
    assert settings.limits.max_request_bytes == 8192
    assert settings.limits.request_read_timeout_s == 30.0
    assert settings.limits.max_concurrent_connections == 100
    assert settings.models.enabled_models == ("example-model",)


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVER_HOST", "0.0.0.0")
    monkeypatch.setenv("SERVER_PORT", "9000")
    monkeypatch.setenv("MAX_REQUEST_BYTES", "not-a-number")
    monkeypatch.setenv("REQUEST_READ_TIMEOUT_S", "0")
    monkeypatch.setenv("ENABLED_MODELS", " example-model , other ,")
    settings = load_settings()
    assert settings.server.host == "0.0.0.0"
    assert settings.server.port == 9000
    assert settings.limits.max_request_bytes == 8192
    assert settings.limits.request_read_timeout_s == 0.0
    assert settings.models.enabled_models == ("example-model", "other")


def test_build_runtime_deps_registers_enabled_models() -> None:
    deps = build_runtime_deps(make_settings())
    assert deps.models.frozen
    assert deps.models.names() == ["example-model"]
    assert deps.sessions.count() == 0
