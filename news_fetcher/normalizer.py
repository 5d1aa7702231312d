from __future__ import annotations

from typing import Any, Dict

from .models import Article


def to_article(raw: Dict[str, Any]) -> Article:
    """
    Convert one raw article object from a success body into an Article.
    Requires:
    - title (string)
    - url (string)
    - source.name (string)
    Optional:
    - author (string or null)
    """
    if not isinstance(raw, dict):
        raise ValueError("Article entry is not an object")

    title = raw.get("title")
    url = raw.get("url")
    source = raw.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None
    author = raw.get("author")

    if not isinstance(title, str) or not isinstance(url, str):
        raise ValueError("Article lacks required fields: title/url")
    if not isinstance(source_name, str):
        raise ValueError("Article lacks required field: source.name")
    if author is not None and not isinstance(author, str):
        raise ValueError("Article author must be a string or null")

    return Article(
        title=title,
        author=author,
        source_name=source_name,
        url=url,
    )
