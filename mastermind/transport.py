"""HTTP transport wrapper independent of game semantics."""
from __future__ import annotations

import sys
from typing import Dict, Optional, Tuple
from urllib.parse import urlsplit

import requests
from colorama import Fore, Style

from mastermind.config import API_TIMEOUT, VERBOSE

SUPPORTED_METHODS = frozenset({"POST", "DELETE"})


class NetworkError(RuntimeError):
    """Raised when no HTTP response could be obtained."""

    def __init__(self, message: str = "network error") -> None:
        super().__init__(message)


class HttpTransport:
    def __init__(
        self,
        timeout: float = API_TIMEOUT,
        verbose: bool = VERBOSE,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.verbose = verbose
        self.session = session or requests.Session()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _log(self, message: str, color: str = Style.RESET_ALL) -> None:
        if not self.verbose:
            return
        print(f"{color}{message}{Style.RESET_ALL}", file=sys.stderr)

    def send(
        self,
        method: str,
        url: str,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, bytes]:
        """Perform one round trip and return ``(status_code, body_bytes)``.

        Any connection, DNS or timeout failure surfaces as ``NetworkError``
        with a generic message; the underlying exception is chained.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        path = urlsplit(url).path or "/"
        try:
            response = self.session.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self._log(f"[{method}] {path} failed: {exc}", Fore.RED)
            raise NetworkError() from exc
        self._log(f"[{method}] {path} -> {response.status_code}", Fore.GREEN)
        return response.status_code, response.content
