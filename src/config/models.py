"""Model catalog configuration."""

from __future__ import annotations

ENV_ENABLED_MODELS = "ENABLED_MODELS"

EXAMPLE_MODEL_NAME = "example-model"

DEFAULT_ENABLED_MODELS: tuple[str, ...] = (EXAMPLE_MODEL_NAME,)

__all__ = [
    "DEFAULT_ENABLED_MODELS",
    "ENV_ENABLED_MODELS",
    "EXAMPLE_MODEL_NAME",
]
