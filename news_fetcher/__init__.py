"""
news_fetcher

A small interactive client for the NewsAPI.org top-headlines and search endpoints.

Core ideas:
- Input: a country code or a search term, plus the API key
- Process: build URL → GET → parse the body as an article list or a provider error
- Output: List[Article], or a RequestError subclass

Example
-------
from news_fetcher import NewsClient, load_credential

key = load_credential()  # NEWS_API_KEY from the environment or .env
client = NewsClient()

for article in client.fetch_by_query("rust", key):
    print(article.source_name, article.title, article.url)
"""
__version__ = "0.1.0"

from .models import Article, ApiErrorBody, ApiOutcome, NewsResponse
from .exceptions import (
    ApiError,
    ConfigError,
    InvalidRequestError,
    MissingCredentialError,
    NewsFetcherError,
    ParseError,
    RequestError,
    TransportError,
)
from .config import load_credential
from .core import NewsClient
from .presenter import render
from .shell import NewsShell, ShellState

__all__ = [
    "Article",
    "ApiErrorBody",
    "ApiOutcome",
    "NewsResponse",
    "ApiError",
    "ConfigError",
    "InvalidRequestError",
    "MissingCredentialError",
    "NewsFetcherError",
    "ParseError",
    "RequestError",
    "TransportError",
    "load_credential",
    "NewsClient",
    "render",
    "NewsShell",
    "ShellState",
]
