"""Response decoder checks."""
from __future__ import annotations

import unittest

from mastermind.decoder import DECODE_FAILURE, decode, decode_empty
from mastermind.models.contracts import CreateGameResponse, ScoreResult
from mastermind.models.outcome import ServerError, Success


class DecodeTest(unittest.TestCase):
    def test_created_game_id(self) -> None:
        outcome = decode(201, b'{"game_id":"abc123"}', CreateGameResponse.from_wire)
        self.assertEqual(outcome, Success(CreateGameResponse(game_id="abc123")))

    def test_error_body_on_client_error(self) -> None:
        outcome = decode(400, b'{"error":"bad guess"}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError("bad guess"))

    def test_unparseable_body_on_server_error(self) -> None:
        outcome = decode(500, b"<html>oops</html>", ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError("HTTP error: 500"))

    def test_empty_body_on_server_error(self) -> None:
        self.assertEqual(decode(503, b"", ScoreResult.from_wire), ServerError("HTTP error: 503"))

    def test_score_payload(self) -> None:
        outcome = decode(200, b'{"black": 2, "white": 1}', ScoreResult.from_wire)
        self.assertEqual(outcome, Success(ScoreResult(black=2, white=1)))

    def test_error_body_on_success_status(self) -> None:
        outcome = decode(200, b'{"error": "game not found"}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError("game not found"))

    def test_unrecognised_shape_on_success_status(self) -> None:
        outcome = decode(200, b'{"black": "two", "white": 1}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError(DECODE_FAILURE))

    def test_boolean_is_not_a_peg_count(self) -> None:
        outcome = decode(200, b'{"black": true, "white": 0}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError(DECODE_FAILURE))

    def test_invalid_bytes_never_raise(self) -> None:
        self.assertEqual(decode(200, b"\xff\xfe", ScoreResult.from_wire), ServerError(DECODE_FAILURE))
        self.assertEqual(decode(200, b"[1, 2]", ScoreResult.from_wire), ServerError(DECODE_FAILURE))
        self.assertEqual(decode(200, b"", CreateGameResponse.from_wire), ServerError(DECODE_FAILURE))

    def test_error_field_must_be_text(self) -> None:
        self.assertEqual(decode(404, b'{"error": 42}', ScoreResult.from_wire), ServerError("HTTP error: 404"))

    def test_deeply_nested_body_never_raises(self) -> None:
        body = b"[" * 100000 + b"]" * 100000
        self.assertEqual(decode(200, body, ScoreResult.from_wire), ServerError(DECODE_FAILURE))
        self.assertEqual(decode(500, body, ScoreResult.from_wire), ServerError("HTTP error: 500"))

    def test_negative_peg_count_is_rejected(self) -> None:
        outcome = decode(200, b'{"black": -3, "white": 9}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError(DECODE_FAILURE))

    def test_oversized_peg_count_is_rejected(self) -> None:
        outcome = decode(200, b'{"black": 1000000000000, "white": 0}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError(DECODE_FAILURE))

    def test_pegs_cannot_exceed_code_length(self) -> None:
        outcome = decode(200, b'{"black": 3, "white": 2}', ScoreResult.from_wire)
        self.assertEqual(outcome, ServerError(DECODE_FAILURE))

    def test_full_score_is_accepted(self) -> None:
        outcome = decode(200, b'{"black": 4, "white": 0}', ScoreResult.from_wire)
        self.assertEqual(outcome, Success(ScoreResult(black=4, white=0)))


class DecodeEmptyTest(unittest.TestCase):
    def test_no_content_is_success(self) -> None:
        self.assertEqual(decode_empty(204), Success(None))

    def test_other_statuses_are_errors(self) -> None:
        self.assertEqual(decode_empty(200), ServerError("HTTP error: 200"))
        self.assertEqual(decode_empty(404), ServerError("HTTP error: 404"))


if __name__ == "__main__":
    unittest.main()
