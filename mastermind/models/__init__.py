"""Wire contracts and result types."""

from .contracts import CreateGameResponse, ErrorResponse, GuessRequest, ScoreResult
from .outcome import Outcome, ServerError, Success, TransportError, error_message

__all__ = [
    "CreateGameResponse",
    "ErrorResponse",
    "GuessRequest",
    "ScoreResult",
    "Outcome",
    "ServerError",
    "Success",
    "TransportError",
    "error_message",
]
