"""Session state machine driving the interactive Mastermind loop."""
from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Dict, Optional

from colorama import Fore, Style

from mastermind.client import GameApiClient
from mastermind.config import VERBOSE
from mastermind.console import GREEN, RED, Console
from mastermind.models.outcome import Success, error_message

WELCOME_BANNER = (
    "Welcome to Mastermind! Type your guess (4 digits between 1-6), "
    "'delete' to delete game, or 'exit' to quit."
)
GUESS_PROMPT = "Enter your guess:"
NEW_GAME_PROMPT = "Do you want to start a new game? (y/n):"
PLAY_AGAIN_PROMPT = "Do you want to play again? (y/n):"

EXIT_COMMAND = "exit"
DELETE_COMMAND = "delete"
YES_ANSWER = "y"


class SessionState(Enum):
    NO_SESSION = "no_session"
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    DELETED = "deleted"
    EXITED = "exited"


class GameSession:
    """
    Owns the current game id and sequences API calls for one player.

    Every network call blocks the loop until its outcome is known, so there is
    never more than one request in flight and the game id is only touched by
    the loop itself.
    """

    def __init__(self, client: GameApiClient, console: Console, verbose: bool = VERBOSE) -> None:
        self.client = client
        self.console = console
        self.verbose = verbose
        self.game_id: Optional[str] = None
        self.state = SessionState.NO_SESSION
        self.exit_code = 0
        self._handlers: Dict[SessionState, Callable[[], SessionState]] = {
            SessionState.NO_SESSION: self._start_round,
            SessionState.AWAITING_GUESS: self._handle_input,
            SessionState.WON: lambda: self._ask_restart(PLAY_AGAIN_PROMPT),
            SessionState.DELETED: lambda: self._ask_restart(NEW_GAME_PROMPT),
        }

    def _log(self, message: str, color: str = Style.RESET_ALL) -> None:
        if not self.verbose:
            return
        print(f"{color}{message}{Style.RESET_ALL}", file=sys.stderr)

    def run(self) -> int:
        """Drive the loop until the player exits and return the process exit code."""
        while self.state is not SessionState.EXITED:
            self.step()
        return self.exit_code

    def step(self) -> SessionState:
        """Execute the handler of the current state and move to the next one."""
        if self.state is SessionState.EXITED:
            return self.state
        next_state = self._handlers[self.state]()
        if next_state is not self.state:
            self._log(f"[session] {self.state.value} -> {next_state.value}", Fore.YELLOW)
        self.state = next_state
        return next_state

    def _show_error(self, message: str) -> None:
        self.console.show(f"Error: {message}", RED)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------
    def _start_round(self) -> SessionState:
        self.console.show(WELCOME_BANNER)
        outcome = self.client.create_game()
        if not isinstance(outcome, Success):
            # Nothing useful can happen without a game id.
            self._show_error(error_message(outcome))
            self.exit_code = 1
            return SessionState.EXITED
        self.game_id = outcome.value
        self._log(f"[session] created game {self.game_id}", Fore.GREEN)
        return SessionState.AWAITING_GUESS

    def _handle_input(self) -> SessionState:
        command = self.console.ask(GUESS_PROMPT)
        if command is None or command == EXIT_COMMAND:
            self.console.show("Exiting game.")
            return SessionState.EXITED
        if command == DELETE_COMMAND:
            return self._delete_game()
        return self._submit_guess(command)

    def _delete_game(self) -> SessionState:
        outcome = self.client.delete_game(self.game_id)
        if isinstance(outcome, Success):
            self.console.show("Game deleted.")
        else:
            self._show_error(error_message(outcome))
        self.game_id = None
        return SessionState.DELETED

    def _submit_guess(self, guess: str) -> SessionState:
        outcome = self.client.submit_guess(self.game_id, guess)
        if not isinstance(outcome, Success):
            self._show_error(error_message(outcome))
            return SessionState.AWAITING_GUESS
        score = outcome.value
        self.console.show(f"Result: {score.render()}", GREEN)
        if score.is_win:
            self.console.show("Congratulations! You won!", GREEN)
            return SessionState.WON
        return SessionState.AWAITING_GUESS

    def _ask_restart(self, prompt: str) -> SessionState:
        answer = self.console.ask(prompt)
        if answer == YES_ANSWER:
            return SessionState.NO_SESSION
        return SessionState.EXITED
