from __future__ import annotations

import logging
from typing import Dict, List, Optional

import requests

from .exceptions import ApiError
from .fetcher import fetch_json
from .models import ApiErrorBody, Article
from .parser import parse_outcome

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "us"


class NewsClient:
    """
    High-level API: query NewsAPI and return a list of Article.

    Pipeline: build URL → GET → parse (success shape, then error shape) → unwrap

    The credential is passed to every call and never stored on the client.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def fetch_top_headlines(self, country_code: str, credential: str) -> List[Article]:
        return self._fetch("top-headlines", {"country": country_code, "apiKey": credential})

    def fetch_by_query(self, query_text: str, credential: str) -> List[Article]:
        return self._fetch(
            "everything",
            {"q": query_text, "sortBy": "popularity", "apiKey": credential},
        )

    def _fetch(self, endpoint: str, params: Dict[str, str]) -> List[Article]:
        payload = fetch_json(endpoint, params, session=self.session)
        outcome = parse_outcome(payload)

        if isinstance(outcome, ApiErrorBody):
            logger.warning("%s returned error %s", endpoint, outcome.code)
            raise ApiError(outcome.code, outcome.message)

        logger.debug("%s returned %d articles", endpoint, len(outcome.articles))
        return outcome.articles
