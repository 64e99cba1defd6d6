"""Translate raw HTTP responses into ``Outcome`` values."""
from __future__ import annotations

import json
from typing import Any, Callable, Optional, TypeVar

from mastermind.models.contracts import ErrorResponse
from mastermind.models.outcome import Outcome, ServerError, Success

T = TypeVar("T")

DECODE_FAILURE = "Failed to decode response"


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _load_json(body: bytes) -> Optional[Any]:
    if not body:
        return None
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError):
        return None


def _try_parse(payload: Any, parse: Callable[[Any], T]) -> Optional[T]:
    """Return ``parse(payload)`` or ``None`` when the payload has another shape."""
    if payload is None:
        return None
    try:
        return parse(payload)
    except (KeyError, TypeError, ValueError):
        return None


def decode(status_code: int, body: bytes, parse: Callable[[Any], T]) -> Outcome[T]:
    """Decode a response expected to carry a ``T`` payload.

    A 2xx body is tried first as ``T`` and then as an error body, since the
    server sometimes reports errors with a success status. Non-2xx bodies are
    only tried as error bodies. This function never raises.
    """
    payload = _load_json(body)
    if is_success_status(status_code):
        value = _try_parse(payload, parse)
        if value is not None:
            return Success(value)
        error = _try_parse(payload, ErrorResponse.from_wire)
        if error is not None:
            return ServerError(error.error)
        return ServerError(DECODE_FAILURE)

    error = _try_parse(payload, ErrorResponse.from_wire)
    if error is not None:
        return ServerError(error.error)
    return ServerError(f"HTTP error: {status_code}")


def decode_empty(status_code: int, expected_status: int = 204) -> Outcome[None]:
    """Decode a response whose only signal is its status code."""
    if status_code == expected_status:
        return Success(None)
    return ServerError(f"HTTP error: {status_code}")
