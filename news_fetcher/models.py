from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass(frozen=True)
class Article:
    """
    One news item as returned by the provider.

    Fields are copied verbatim from the response body.
    """
    title: str
    author: Optional[str]
    source_name: str
    url: str


@dataclass(frozen=True)
class NewsResponse:
    status: str
    articles: List[Article]


@dataclass(frozen=True)
class ApiErrorBody:
    status: str
    code: str
    message: str


# A response body is entirely one of these, never both.
ApiOutcome = Union[NewsResponse, ApiErrorBody]
