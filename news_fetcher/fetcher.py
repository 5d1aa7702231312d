from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from . import __version__
from .exceptions import InvalidRequestError, ParseError, TransportError

logger = logging.getLogger(__name__)

BASE_URL = "https://newsapi.org/v2"
USER_AGENT = f"news-fetcher-cli/{__version__}"


def build_url(endpoint: str, params: Dict[str, str]) -> str:
    """
    Build the request URL for an endpoint.

    Every parameter value is URL-encoded and parameter order is preserved.

    Raises InvalidRequestError when a value cannot be encoded as UTF-8.
    """
    try:
        return requests.Request("GET", f"{BASE_URL}/{endpoint}", params=params).prepare().url
    except UnicodeError as e:
        raise InvalidRequestError(f"Cannot encode parameters for {endpoint} ({e})") from e


def fetch_json(
    endpoint: str,
    params: Dict[str, str],
    *,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    Issue a single GET and return the decoded JSON body.

    The body is decoded whatever the HTTP status, because the provider reports
    errors as JSON with 4xx statuses. No retry.

    Raises TransportError on network failures and ParseError when the body is not JSON.
    """
    url = build_url(endpoint, params)
    http = session or requests
    logger.debug("GET %s/%s", BASE_URL, endpoint)
    try:
        resp = http.get(url, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        raise TransportError(f"Request to {endpoint} failed ({e})") from e

    logger.debug("%s answered with HTTP %s", endpoint, resp.status_code)
    try:
        return resp.json()
    except ValueError as e:
        raise ParseError(f"Response from {endpoint} is not valid JSON ({e})") from e
