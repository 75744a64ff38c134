"""Built-in model catalog and startup registration."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from src.config.models import EXAMPLE_MODEL_NAME

from .handler import ModelHandler
from .example import ExampleModel
from .registry import ModelRegistry

logger = logging.getLogger(__name__)

ModelFactory = Callable[[], ModelHandler]

MODEL_CATALOG: dict[str, ModelFactory] = {
    EXAMPLE_MODEL_NAME: ExampleModel,
}


def build_registry(enabled_models: Iterable[str]) -> ModelRegistry:
    """Register the enabled catalog models and freeze the registry."""
    registry = ModelRegistry()
    for name in enabled_models:
        factory = MODEL_CATALOG.get(name)
        if factory is None:
            raise ValueError(f"unknown model {name!r}; available: {', '.join(sorted(MODEL_CATALOG))}")
        registry.register(name, factory())
    registry.freeze()
    logger.info("models: registered %s", ", ".join(registry.names()) or "(none)")
    return registry


__all__ = ["MODEL_CATALOG", "ModelFactory", "build_registry"]
