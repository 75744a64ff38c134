"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.models.registry import ModelRegistry
    from src.sessions.store import SessionStore
    from src.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    models: ModelRegistry
    sessions: SessionStore
    connections: ConnectionManager
    settings: AppSettings


__all__ = ["RuntimeDeps"]
