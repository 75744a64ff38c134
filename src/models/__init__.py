"""Model handlers and the registry they are looked up in."""

from .handler import ModelHandler
from .example import ExampleModel
from .registry import ModelRegistry
from .catalog import MODEL_CATALOG, build_registry

__all__ = ["MODEL_CATALOG", "ExampleModel", "ModelHandler", "ModelRegistry", "build_registry"]
