"""Demonstration routes covering each response shape."""
from __future__ import annotations

from dataclasses import dataclass

from starlette.requests import Request
from starlette.routing import Route

from jsonresponder import __version__
from jsonresponder.api.envelopes import (
    Envelope,
    ErrorEntry,
    build_errors_response,
    build_response,
)
from jsonresponder.web import ValueRoute


@dataclass(frozen=True)
class Item:
    n: int
    s: str


async def health(request: Request) -> dict[str, object]:
    return {"ok": True, "version": __version__}


async def demo_data(request: Request) -> dict[str, object]:
    return {"one": 1, "two": "second"}


async def demo_items(request: Request) -> list[Item]:
    return [Item(n=1, s="s"), Item(n=2, s="str")]


async def demo_empty(request: Request) -> None:
    return None


def demo_error(request: Request) -> None:
    raise RuntimeError("something went wrong")


def demo_errors(request: Request) -> list[Exception]:
    return [ValueError("some error"), ValueError("second error")]


def demo_aggregate(request: Request) -> ExceptionGroup:
    return ExceptionGroup(
        "batch failed",
        [KeyError("missing-key"), ExceptionGroup("nested", [TimeoutError("upstream timed out")])],
    )


async def demo_accepted(request: Request) -> Envelope:
    return build_response(202, {"queued": True})


async def demo_conflict(request: Request) -> Envelope:
    return build_errors_response(
        409,
        ErrorEntry(description="resource already exists", code=0, details="id=demo"),
    )


def demo_routes() -> list[Route]:
    return [
        ValueRoute("/health", health, methods=["GET"]),
        ValueRoute("/demo/data", demo_data, methods=["GET"]),
        ValueRoute("/demo/items", demo_items, methods=["GET"]),
        ValueRoute("/demo/empty", demo_empty, methods=["GET"]),
        ValueRoute("/demo/error", demo_error, methods=["GET"]),
        ValueRoute("/demo/errors", demo_errors, methods=["GET"]),
        ValueRoute("/demo/aggregate", demo_aggregate, methods=["GET"]),
        ValueRoute("/demo/accepted", demo_accepted, methods=["POST"]),
        ValueRoute("/demo/conflict", demo_conflict, methods=["POST"]),
    ]


__all__ = ["demo_routes"]
