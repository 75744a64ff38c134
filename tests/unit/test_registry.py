from __future__ import annotations

import pytest

from src.models import MODEL_CATALOG, ExampleModel, ModelRegistry, build_registry

from tests.unit.fakes import EchoModel


def test_registry_lookup_and_names_sorted() -> None:
    registry = ModelRegistry()
    b, a = EchoModel(), EchoModel()
    registry.register("b", b)
    registry.register("a", a)
    assert registry.names() == ["a", "b"]
    assert registry.lookup("a") is a
    assert registry.lookup("missing") is None
    assert "b" in registry
    assert len(registry) == 2


def test_registry_register_overwrites() -> None:
    registry = ModelRegistry()
    first, second = EchoModel(), EchoModel()
    registry.register("m", first)
    registry.register("m", second)
    assert registry.lookup("m") is second
    assert registry.names() == ["m"]


def test_registry_rejects_registration_after_freeze() -> None:
    registry = ModelRegistry()
    registry.register("m", EchoModel())
    registry.freeze()
    with pytest.raises(RuntimeError):
        registry.register("n", EchoModel())
    assert registry.names() == ["m"]


def test_build_registry_from_catalog() -> None:
    registry = build_registry(["example-model"])
    assert registry.frozen
    assert registry.names() == ["example-model"]
    assert isinstance(registry.lookup("example-model"), ExampleModel)


def test_build_registry_unknown_model() -> None:
    with pytest.raises(ValueError):
        build_registry(["nope"])


def test_catalog_contains_example_model() -> None:
    assert "example-model" in MODEL_CATALOG


def test_example_model_counts_turns() -> None:
    model = ExampleModel()
    assert model.generate("hi", []) == "Response to: hi. This is turn #1 in the conversation."
    assert model.generate("again", ["hi", "r"]) == "Response to: again. This is turn #2 in the conversation."
