"""Uniform JSON response envelopes for Starlette applications."""

__version__ = "0.1.0"

from .api import (  # noqa: E402
    Classified,
    Envelope,
    ErrorEntry,
    JSONResponder,
    ValueKind,
    build_errors_response,
    build_response,
    classify,
)
from .web import ValueRoute, build_app, register_routes  # noqa: E402

__all__ = [
    "Classified",
    "Envelope",
    "ErrorEntry",
    "JSONResponder",
    "ValueKind",
    "ValueRoute",
    "__version__",
    "build_app",
    "build_errors_response",
    "build_response",
    "classify",
    "register_routes",
]
