"""Minimal CLI helpers for running the responder demo server."""
from __future__ import annotations

import argparse
import logging
from typing import Callable

import uvicorn
from starlette.applications import Starlette

from jsonresponder.utils.config import DEBUG, HOST, PORT

AppFactory = Callable[[bool], Starlette]
Serve = Callable[[Starlette, str, int], None]


def build_parser() -> argparse.ArgumentParser:
    """Create an argument parser for the runtime."""

    parser = argparse.ArgumentParser(description="jsonresponder demo server")
    parser.add_argument(
        "--host",
        type=str,
        default=HOST,
        help=f"Host to bind the HTTP server to (default: {HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=PORT,
        help=f"Port to bind the HTTP server to (default: {PORT})",
    )
    parser.add_argument(
        "--debug", action="store_true", default=DEBUG, help="Enable debug logging"
    )
    return parser


def serve_uvicorn(app: Starlette, host: str, port: int) -> None:
    uvicorn.run(app, host=host, port=port)


def run(
    args: argparse.Namespace,
    *,
    logger: logging.Logger,
    app_factory: AppFactory,
    serve: Serve = serve_uvicorn,
) -> None:
    """Validate arguments, build the app and hand it to ``serve``."""

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    if args.port <= 0 or args.port > 65535:
        logger.error("Invalid --port: %s (must be between 1 and 65535)", args.port)
        raise SystemExit(2)

    logger.info(
        "Starting responder server on http://%s:%s (debug=%s)",
        args.host,
        args.port,
        "on" if args.debug else "off",
    )

    app = app_factory(args.debug)
    try:
        serve(app, args.host, int(args.port))
    except OSError as exc:  # pragma: no cover - depends on local env
        logger.error(
            "Failed to start server on %s:%s: %s",
            args.host,
            args.port,
            exc.strerror or exc,
        )
        raise SystemExit(1)


__all__ = ["build_parser", "run", "serve_uvicorn"]
