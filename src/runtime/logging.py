"""Logging initialization."""

from __future__ import annotations

import logging

from src.config.logging import LOG_LEVEL, LOG_FORMAT


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
    # asyncio logs every peer reset at ERROR by default; those are handled per connection.
    logging.getLogger("asyncio").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
