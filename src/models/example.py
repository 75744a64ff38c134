"""Built-in example model."""

from __future__ import annotations

from collections.abc import Sequence

from .handler import ModelHandler


class ExampleModel(ModelHandler):
    def generate(self, prompt: str, context: Sequence[str]) -> str:
        turn = len(context) // 2 + 1
        return f"Response to: {prompt}. This is turn #{turn} in the conversation."


__all__ = ["ExampleModel"]
