"""Runtime dependency construction (model registry, session store, admission control)."""

from __future__ import annotations

import logging

from src.state import AppSettings, RuntimeDeps
from src.models.catalog import build_registry
from src.models.registry import ModelRegistry
from src.sessions.store import SessionStore
from src.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(
    settings: AppSettings | None = None,
    *,
    models: ModelRegistry | None = None,
) -> RuntimeDeps:
    """Wire the shared stores. A caller-supplied registry is frozen before use."""
    settings = settings or load_settings()

    if models is None:
        models = build_registry(settings.models.enabled_models)
    elif not models.frozen:
        models.freeze()

    return RuntimeDeps(
        models=models,
        sessions=SessionStore(),
        connections=ConnectionManager(max_connections=settings.limits.max_concurrent_connections),
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
