from __future__ import annotations

import logging
from typing import Any, Optional

from .exceptions import ParseError
from .models import ApiErrorBody, ApiOutcome, NewsResponse
from .normalizer import to_article

logger = logging.getLogger(__name__)


def _as_news_response(payload: Any) -> Optional[NewsResponse]:
    """Success shape: ``status`` plus an ``articles`` list of well-formed articles."""
    if not isinstance(payload, dict):
        return None
    status = payload.get("status")
    articles = payload.get("articles")
    if not isinstance(status, str) or not isinstance(articles, list):
        return None
    try:
        parsed = [to_article(a) for a in articles]
    except ValueError as e:
        logger.debug("Body has articles but does not match the success shape: %s", e)
        return None
    return NewsResponse(status=status, articles=parsed)


def _as_error_body(payload: Any) -> Optional[ApiErrorBody]:
    """Error shape: ``status``, ``code`` and ``message`` strings."""
    if not isinstance(payload, dict):
        return None
    status = payload.get("status")
    code = payload.get("code")
    message = payload.get("message")
    if not all(isinstance(v, str) for v in (status, code, message)):
        return None
    return ApiErrorBody(status=status, code=code, message=message)


def parse_outcome(payload: Any) -> ApiOutcome:
    """
    Map a decoded response body to exactly one ApiOutcome variant.

    Bodies carry no discriminant, so the order matters: the success shape is
    tried first, then the error shape. A body matching neither raises ParseError.
    """
    outcome: Optional[ApiOutcome] = _as_news_response(payload)
    if outcome is None:
        outcome = _as_error_body(payload)
    if outcome is None:
        raise ParseError("Response matches neither the article list nor the error shape")
    return outcome
