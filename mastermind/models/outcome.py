"""Tri-state result returned by every network operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class ServerError:
    """An HTTP response was received but it does not carry the expected payload."""

    message: str


@dataclass(frozen=True)
class TransportError:
    """No HTTP response was obtained (connection, DNS or timeout failure)."""

    message: str


Outcome = Union[Success[T], ServerError, TransportError]


def error_message(outcome: "Outcome") -> str:
    """Return the display text of a failed outcome."""
    if isinstance(outcome, (ServerError, TransportError)):
        return outcome.message
    raise ValueError("Successful outcomes carry no error message")
