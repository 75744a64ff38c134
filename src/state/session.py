"""Session state owned by the session store."""

from __future__ import annotations

from typing import TYPE_CHECKING
from dataclasses import field, dataclass

if TYPE_CHECKING:
    from src.models.handler import ModelHandler


@dataclass(slots=True)
class Session:
    """Conversational state bound to one registered model.

    The handler is resolved from the registry when the session is created, so a
    live session always has a model to run. ``context`` alternates prompt and
    response and only ever grows by complete pairs.
    """

    model: str
    handler: ModelHandler
    context: list[str] = field(default_factory=list)

    def record_turn(self, prompt: str, response: str) -> None:
        self.context.extend((prompt, response))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(model=self.model, context=tuple(self.context))


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    model: str
    context: tuple[str, ...]


__all__ = ["Session", "SessionSnapshot"]
