"""Starlette wiring that routes handler return values through a responder."""
from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Callable, Iterable, Sequence

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import BaseRoute, Route

from jsonresponder.api.responder import JSONResponder

_LOGGER = logging.getLogger("jsonresponder.web")

ValueEndpoint = Callable[[Request], Any]


def _is_async_endpoint(endpoint: ValueEndpoint) -> bool:
    while isinstance(endpoint, functools.partial):
        endpoint = endpoint.func
    return inspect.iscoroutinefunction(endpoint) or (
        callable(endpoint) and inspect.iscoroutinefunction(endpoint.__call__)
    )


def _render_with_responder(endpoint: ValueEndpoint) -> Callable[[Request], Any]:
    @functools.wraps(endpoint)
    async def handler(request: Request) -> Response:
        try:
            if _is_async_endpoint(endpoint):
                value = await endpoint(request)
            else:
                value = await run_in_threadpool(endpoint, request)
            if inspect.isawaitable(value):
                value = await value
        except HTTPException:
            raise
        except Exception as exc:
            _LOGGER.exception(
                "endpoint.error method=%s path=%s", request.method, request.url.path
            )
            value = exc

        if isinstance(value, Response):
            return value

        responder = getattr(request.app.state, "responder", None)
        if responder is None:
            raise RuntimeError("No responder installed; build the app with build_app()")
        return responder(request, value)

    return handler


class ValueRoute(Route):
    """A route whose endpoint returns a plain value instead of a Response."""

    def __init__(
        self,
        path: str,
        endpoint: ValueEndpoint,
        *,
        methods: Sequence[str] | None = None,
        name: str | None = None,
    ) -> None:
        self.value_endpoint = endpoint
        super().__init__(
            path,
            _render_with_responder(endpoint),
            methods=list(methods) if methods is not None else None,
            name=name,
        )


def build_app(
    routes: Iterable[BaseRoute] = (),
    *,
    responder: JSONResponder | None = None,
    debug: bool = False,
) -> Starlette:
    """Create a Starlette app that renders ``ValueRoute`` results with ``responder``."""

    app = Starlette(debug=debug, routes=list(routes))
    app.state.responder = responder if responder is not None else JSONResponder()
    return app


def register_routes(app: Starlette, routes: Iterable[BaseRoute]) -> None:
    for route in routes:
        app.router.routes.append(route)


__all__ = ["ValueEndpoint", "ValueRoute", "build_app", "register_routes"]
