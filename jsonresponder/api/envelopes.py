"""Envelope models and builders for JSON responses."""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python


class ErrorEntry(BaseModel):
    """One failure reported to the client.

    ``code`` and ``details`` are optional: ``None`` keeps them out of the
    payload, while an explicit ``0`` code is a real value and is emitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str
    code: int | None = None
    details: str | None = None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"description": self.description}
        if self.code is not None:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload


class Envelope(BaseModel):
    """Canonical response wrapper: status code plus ``data`` and/or ``errors``.

    The status code drives the HTTP response and never appears in the body.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(ge=100, le=999)
    data: Any = None
    errors: list[ErrorEntry] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.data is not None:
            payload["data"] = to_jsonable_python(self.data)
        if self.errors:
            payload["errors"] = [entry.to_payload() for entry in self.errors]
        return payload


def describe_error(exc: BaseException) -> str:
    """Return the client-facing message for ``exc``."""

    message = str(exc)
    return message or type(exc).__name__


def leaf_errors(group: BaseExceptionGroup) -> Iterator[BaseException]:
    """Yield the non-group exceptions of ``group`` depth-first, in order."""

    for exc in group.exceptions:
        if isinstance(exc, BaseExceptionGroup):
            yield from leaf_errors(exc)
        else:
            yield exc


def to_error_entries(errors: Iterable[BaseException | ErrorEntry]) -> list[ErrorEntry]:
    entries: list[ErrorEntry] = []
    for err in errors:
        if isinstance(err, ErrorEntry):
            entries.append(err)
        else:
            entries.append(ErrorEntry(description=describe_error(err)))
    return entries


def build_response(
    status_code: int, data: Any = None, *errors: BaseException | ErrorEntry
) -> Envelope:
    """Assemble an envelope; errors become description-only entries in order."""

    return Envelope(
        status_code=status_code,
        data=data,
        errors=to_error_entries(errors) if errors else None,
    )


def build_errors_response(status_code: int, *errors: BaseException | ErrorEntry) -> Envelope:
    return build_response(status_code, None, *errors)


__all__ = [
    "Envelope",
    "ErrorEntry",
    "build_errors_response",
    "build_response",
    "describe_error",
    "leaf_errors",
    "to_error_entries",
]
