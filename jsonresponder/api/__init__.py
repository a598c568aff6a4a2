"""API surface for jsonresponder."""

from .envelopes import Envelope, ErrorEntry, build_errors_response, build_response
from .responder import Classified, JSONResponder, ValueKind, classify

__all__ = [
    "Classified",
    "Envelope",
    "ErrorEntry",
    "JSONResponder",
    "ValueKind",
    "build_errors_response",
    "build_response",
    "classify",
]
