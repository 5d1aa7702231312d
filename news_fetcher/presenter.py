from __future__ import annotations

from typing import IO, Iterable, Optional

from .models import Article


def render(articles: Iterable[Article], out: Optional[IO[str]] = None) -> None:
    """Print articles for the terminal, or a single line when there are none."""
    articles = list(articles)
    if not articles:
        print("No results.", file=out)
        return

    print("\n--- Results ---", file=out)
    for article in articles:
        print(f"> {article.title} ({article.source_name})", file=out)
        print(f"  Read more: {article.url}\n", file=out)
