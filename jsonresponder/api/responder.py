"""Render arbitrary handler results as JSON envelopes."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NamedTuple

from starlette import status
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .envelopes import Envelope, build_errors_response, build_response, leaf_errors

_LOGGER = logging.getLogger("jsonresponder.api.responder")

# Statuses that must not carry a body on the wire.
_BODYLESS_STATUSES = frozenset({status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED})


class ValueKind(str, Enum):
    ABSENT = "absent"
    ENVELOPE = "envelope"
    AGGREGATE_ERROR = "aggregate_error"
    SINGLE_ERROR = "single_error"
    ERROR_LIST = "error_list"
    OTHER = "other"


class Classified(NamedTuple):
    kind: ValueKind
    value: Any


def _is_error_list(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or not value:
        return False
    return all(isinstance(item, BaseException) for item in value)


def classify(value: Any) -> Classified:
    """Decide which envelope policy applies to ``value``.

    Checks run in a fixed order: envelopes win over errors and exception
    groups are expanded before the single-exception check can match them.
    Aggregate errors are reduced to a tuple of their leaf exceptions.
    """

    if value is None:
        return Classified(ValueKind.ABSENT, None)
    if isinstance(value, Envelope):
        return Classified(ValueKind.ENVELOPE, value)
    if isinstance(value, BaseExceptionGroup):
        return Classified(ValueKind.AGGREGATE_ERROR, tuple(leaf_errors(value)))
    if isinstance(value, BaseException):
        return Classified(ValueKind.SINGLE_ERROR, value)
    if _is_error_list(value):
        return Classified(ValueKind.ERROR_LIST, tuple(value))
    return Classified(ValueKind.OTHER, value)


class JSONResponder:
    """Response-rendering strategy for :func:`jsonresponder.web.build_app`.

    Every call builds a fresh envelope and response; instances hold no
    per-request state and can be shared across concurrent requests.
    """

    def to_envelope(self, classified: Classified) -> Envelope:
        kind, value = classified
        if kind is ValueKind.ENVELOPE:
            return value
        if kind is ValueKind.SINGLE_ERROR:
            return build_errors_response(status.HTTP_500_INTERNAL_SERVER_ERROR, value)
        if kind in (ValueKind.AGGREGATE_ERROR, ValueKind.ERROR_LIST):
            return build_errors_response(status.HTTP_500_INTERNAL_SERVER_ERROR, *value)
        if kind is ValueKind.OTHER:
            return build_response(status.HTTP_200_OK, value)
        raise ValueError(f"{kind.value} values have no envelope")

    def respond(self, request: Request, value: Any) -> Response:
        classified = classify(value)
        if classified.kind is ValueKind.ABSENT:
            _LOGGER.debug("respond kind=absent status=204 path=%s", request.url.path)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        envelope = self.to_envelope(classified)
        _LOGGER.debug(
            "respond kind=%s status=%s path=%s",
            classified.kind.value,
            envelope.status_code,
            request.url.path,
        )
        if envelope.status_code in _BODYLESS_STATUSES:
            return Response(status_code=envelope.status_code)
        return JSONResponse(envelope.to_payload(), status_code=envelope.status_code)

    def __call__(self, request: Request, value: Any) -> Response:
        return self.respond(request, value)


__all__ = ["Classified", "JSONResponder", "ValueKind", "classify"]
