"""Terminal input/output for the interactive game loop."""
from __future__ import annotations

from typing import Optional, Protocol

from colorama import Fore, Style

RED = Fore.RED
GREEN = Fore.GREEN
RESET = Style.RESET_ALL


class Console(Protocol):
    def show(self, message: str, color: str = RESET) -> None:
        ...

    def ask(self, prompt: str) -> Optional[str]:
        ...


class TerminalConsole:
    """Prints to stdout and reads lines from stdin.

    ``ask`` returns the trimmed, lower-cased line, or ``None`` once input is
    exhausted (EOF or Ctrl-C).
    """

    def show(self, message: str, color: str = RESET) -> None:
        if color == RESET:
            print(message)
        else:
            print(f"{color}{message}{RESET}")

    def ask(self, prompt: str) -> Optional[str]:
        print(prompt)
        try:
            line = input()
        except (EOFError, KeyboardInterrupt):
            return None
        return line.strip().lower()
