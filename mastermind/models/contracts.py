"""Wire contracts for the Mastermind HTTP API.

Each class mirrors one JSON payload exchanged with the server. ``from_wire``
raises ``ValueError`` when a payload does not have the expected shape so the
decoder can fall back to the next candidate shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from mastermind.config import CODE_LENGTH


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def _require_str(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


def _require_int(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    # bool is an int subclass; JSON true/false is not a peg count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer")
    return value


@dataclass(frozen=True)
class CreateGameResponse:
    game_id: str

    @staticmethod
    def from_wire(payload: Any) -> "CreateGameResponse":
        return CreateGameResponse(game_id=_require_str(_require_object(payload), "game_id"))


@dataclass(frozen=True)
class GuessRequest:
    """Body of ``POST /guess``. The guess text is forwarded as typed."""

    game_id: str
    guess: str

    def to_wire(self) -> Dict[str, str]:
        return {"game_id": self.game_id, "guess": self.guess}


@dataclass(frozen=True)
class ScoreResult:
    """Server feedback for one guess: exact matches (black) and colour matches (white)."""

    black: int
    white: int

    @property
    def is_win(self) -> bool:
        return self.black == CODE_LENGTH

    def render(self) -> str:
        return "B" * self.black + "W" * self.white

    @staticmethod
    def from_wire(payload: Any) -> "ScoreResult":
        body = _require_object(payload)
        black = _require_int(body, "black")
        white = _require_int(body, "white")
        if black < 0 or white < 0 or black + white > CODE_LENGTH:
            raise ValueError(f"Score out of range: black={black} white={white}")
        return ScoreResult(black=black, white=white)


@dataclass(frozen=True)
class ErrorResponse:
    error: str

    @staticmethod
    def from_wire(payload: Any) -> "ErrorResponse":
        return ErrorResponse(error=_require_str(_require_object(payload), "error"))
