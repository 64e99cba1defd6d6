"""Game API client for the Mastermind backend."""
from __future__ import annotations

import json
from typing import Optional
from urllib.parse import quote

from mastermind.config import API_BASE_URL
from mastermind.decoder import decode, decode_empty
from mastermind.models.contracts import CreateGameResponse, GuessRequest, ScoreResult
from mastermind.models.outcome import Outcome, Success, TransportError
from mastermind.transport import HttpTransport, NetworkError


class GameApiClient:
    """
    Thin layer for talking to the game server.

    It composes transport and decoder and returns every failure as an
    ``Outcome``; deciding what to do with a failure stays with the caller.
    """

    def __init__(self, transport: Optional[HttpTransport] = None, base_url: str = API_BASE_URL) -> None:
        self.transport = transport or HttpTransport()
        self.base_url = base_url.rstrip("/")

    def close(self) -> None:
        self.transport.close()

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------
    def create_game(self) -> Outcome[str]:
        try:
            status, body = self.transport.send("POST", f"{self.base_url}/game")
        except NetworkError as exc:
            return TransportError(str(exc))
        outcome = decode(status, body, CreateGameResponse.from_wire)
        if isinstance(outcome, Success):
            return Success(outcome.value.game_id)
        return outcome

    def delete_game(self, game_id: str) -> Outcome[None]:
        # No local bookkeeping: repeated deletes always ask the server.
        url = f"{self.base_url}/game/{quote(game_id, safe='')}"
        try:
            status, _ = self.transport.send("DELETE", url)
        except NetworkError as exc:
            return TransportError(str(exc))
        return decode_empty(status, 204)

    # ------------------------------------------------------------------
    # Gameplay
    # ------------------------------------------------------------------
    def submit_guess(self, game_id: str, guess: str) -> Outcome[ScoreResult]:
        request = GuessRequest(game_id=game_id, guess=guess)
        try:
            status, body = self.transport.send(
                "POST",
                f"{self.base_url}/guess",
                body=json.dumps(request.to_wire()).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except NetworkError as exc:
            return TransportError(str(exc))
        return decode(status, body, ScoreResult.from_wire)
