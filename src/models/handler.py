"""Model handler abstraction.

The dispatcher never depends on a concrete model. Each model implements
``ModelHandler.generate``:

- it receives the prompt and the session's accumulated context on every call,
- it keeps no conversational state of its own (the session owns the history),
- it signals failure by raising, conventionally ``ModelError``.

Handlers are registered as instances, so a model can carry its own
configuration without changing the dispatcher contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ModelHandler(ABC):
    """A named, pure computation over a prompt and prior context."""

    @abstractmethod
    def generate(self, prompt: str, context: Sequence[str]) -> str:
        """Produce a response for ``prompt`` given alternating prompt/response ``context``.

        Raises:
            ModelError: When no response can be produced.
        """


__all__ = ["ModelHandler"]
