"""Entry point wiring configuration, API client and console into a game session."""
from __future__ import annotations

import sys
from typing import Optional

from colorama import init as colorama_init

from mastermind.client import GameApiClient
from mastermind.config import API_BASE_URL, API_TIMEOUT, VERBOSE
from mastermind.console import Console, TerminalConsole
from mastermind.session import GameSession
from mastermind.transport import HttpTransport


def run(
    base_url: str = API_BASE_URL,
    console: Optional[Console] = None,
    transport: Optional[HttpTransport] = None,
) -> int:
    """Play until the user exits and return the process exit code."""
    transport = transport or HttpTransport(timeout=API_TIMEOUT, verbose=VERBOSE)
    with transport:
        client = GameApiClient(transport=transport, base_url=base_url)
        session = GameSession(client, console or TerminalConsole())
        return session.run()


def main() -> None:
    colorama_init()
    sys.exit(run())


if __name__ == "__main__":
    main()
