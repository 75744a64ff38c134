"""Model registry: model name to handler, immutable once serving starts."""

from __future__ import annotations

import logging

from .handler import ModelHandler

logger = logging.getLogger(__name__)


class ModelRegistry:
    """Name -> ``ModelHandler`` mapping.

    Registration is only allowed during startup. ``freeze()`` ends that phase;
    afterwards the registry is read concurrently without locking.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, ModelHandler] = {}
        self._frozen = False

    def register(self, name: str, handler: ModelHandler) -> None:
        if self._frozen:
            raise RuntimeError(f"cannot register model {name!r}: registry is frozen")
        if name in self._handlers:
            logger.info("models: replacing handler for %s", name)
        self._handlers[name] = handler

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> ModelHandler | None:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["ModelRegistry"]
