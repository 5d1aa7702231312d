from __future__ import annotations

import enum
import logging
import sys
from typing import IO, Callable, List, Optional

from .core import DEFAULT_COUNTRY, NewsClient
from .exceptions import RequestError
from .models import Article
from .presenter import render

logger = logging.getLogger(__name__)

MENU = (
    "\nWhat would you like to do?\n"
    "  1. Show top headlines (requires a full API key)\n"
    "  2. Search news by keyword\n"
    "  q. Quit"
)


class ShellState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class NewsShell:
    """
    Menu-driven loop over a NewsClient.

    One choice is handled completely, network call included, before the next
    prompt. Request failures are printed and the loop continues. End of input
    counts as quitting.
    """

    def __init__(
        self,
        credential: str,
        *,
        client: Optional[NewsClient] = None,
        stdin: Optional[IO[str]] = None,
        stdout: Optional[IO[str]] = None,
        country: str = DEFAULT_COUNTRY,
    ) -> None:
        self._credential = credential
        self.client = client or NewsClient()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.country = country
        self.state = ShellState.RUNNING

    def run(self) -> None:
        while self.state is ShellState.RUNNING:
            self.step()

    def step(self) -> ShellState:
        self._say(MENU)
        choice = self._read_line()
        if choice is None:
            return self._quit()

        if choice == "1":
            self._say("Fetching the latest headlines...")
            self._show(lambda: self.client.fetch_top_headlines(self.country, self._credential))
        elif choice == "2":
            self._say("Enter a search term:")
            query = self._read_line()
            if query is None:
                return self._quit()
            self._say(f"Searching news for: {query}...")
            self._show(lambda: self.client.fetch_by_query(query, self._credential))
        elif choice in ("q", "Q"):
            return self._quit()
        else:
            self._say("Invalid choice, please try again.")
        return self.state

    def _show(self, fetch: Callable[[], List[Article]]) -> None:
        try:
            articles = fetch()
        except RequestError as e:
            logger.debug("Request failed", exc_info=True)
            self._say(f"Error while fetching news: {e}")
            return
        render(articles, out=self.stdout)

    def _read_line(self) -> Optional[str]:
        """Return the next trimmed line, or None once input is closed or unreadable."""
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Reading input failed, quitting: %s", e)
            return None
        if not line:
            logger.debug("End of input")
            return None
        return line.strip()

    def _quit(self) -> ShellState:
        self._say("Goodbye!")
        self.state = ShellState.TERMINATED
        return self.state

    def _say(self, text: str) -> None:
        print(text, file=self.stdout)
