"""Session dispatch server: listener binding and the accept loop."""

from __future__ import annotations

import sys
import asyncio
import logging
import argparse
import contextlib
import dataclasses

from src.state import RuntimeDeps
from src.runtime.logging import configure_logging
from src.runtime.settings import load_settings
from src.runtime.dependencies import build_runtime_deps
from src.handlers.connection import handle_connection

logger = logging.getLogger(__name__)


async def start_server(runtime_deps: RuntimeDeps) -> asyncio.Server:
    """Bind the listener; every accepted connection runs in its own task."""

    async def _on_connect(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await handle_connection(reader, writer, runtime_deps)

    server_settings = runtime_deps.settings.server
    return await asyncio.start_server(_on_connect, server_settings.host, server_settings.port)


async def serve(runtime_deps: RuntimeDeps) -> None:
    server = await start_server(runtime_deps)
    addrs = ", ".join(str(sock.getsockname()) for sock in server.sockets)
    logger.info("server: listening on %s (models: %s)", addrs, ", ".join(runtime_deps.models.names()))
    async with server:
        await server.serve_forever()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Session dispatch server")
    p.add_argument("--host", default=None, help="bind address (overrides SERVER_HOST)")
    p.add_argument("--port", type=int, default=None, help="bind port (overrides SERVER_PORT)")
    p.add_argument("--log-level", default=None, help="overrides LOG_LEVEL")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    settings = load_settings()
    server_settings = settings.server
    if args.host is not None:
        server_settings = dataclasses.replace(server_settings, host=args.host)
    if args.port is not None:
        server_settings = dataclasses.replace(server_settings, port=args.port)
    settings = dataclasses.replace(settings, server=server_settings)

    try:
        runtime_deps = build_runtime_deps(settings)
    except ValueError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 1

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(serve(runtime_deps))
    logger.info("server: stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
