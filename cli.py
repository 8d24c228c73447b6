#!/usr/bin/env python3
"""Task Board CLI."""
from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from task_board.config import ConfigError, Settings, load_settings
from task_board.logging_setup import setup_logging

logger = logging.getLogger("task_board.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-board",
        description="In-memory task list served over HTTP.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API.",
    )
    serve_parser.add_argument(
        "--host",
        help="Bind address (defaults to TASK_BOARD_HOST or 0.0.0.0).",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Listening port (defaults to PORT or 3000).",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only).",
    )

    subparsers.add_parser(
        "check-config",
        help="Validate the environment configuration and print the resolved values.",
    )

    subparsers.add_parser(
        "routes",
        help="List the HTTP routes the API exposes.",
    )

    return parser


def _cmd_serve(settings: Settings, host: str | None, port: int | None, reload: bool) -> int:
    import uvicorn

    host = host or settings.host
    port = port or settings.port
    setup_logging(settings.log_level)

    base_url = f"http://localhost:{port}"
    logger.info(f"Task Board server starting on {base_url}")
    logger.info(f"API available at {base_url}/api/tareas")

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    return 0


def _cmd_check_config(settings: Settings) -> int:
    print(
        "Configuration OK:",
        f"environment={settings.environment}",
        f"host={settings.host}",
        f"port={settings.port}",
        f"id_start={settings.id_start}",
        f"seed_demo={'yes' if settings.seed_demo else 'no'}",
        f"origins={','.join(settings.allowed_origins)}",
        f"log_level={settings.log_level}",
    )
    return 0


def _cmd_routes(settings: Settings) -> int:
    from fastapi.routing import APIRoute

    from api.main import create_app
    from task_board.task_store import TaskStore

    app = create_app(settings=settings, store=TaskStore(id_start=settings.id_start))
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ",".join(sorted(route.methods))
            print(f"{methods:<8} {route.path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    if args.command == "serve":
        return _cmd_serve(settings, host=args.host, port=args.port, reload=args.reload)
    if args.command == "check-config":
        return _cmd_check_config(settings)
    if args.command == "routes":
        return _cmd_routes(settings)

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
