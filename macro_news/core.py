from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import requests

from .classifier import extract_themes
from .config import get_api_key
from .exceptions import NewsAPIStatusError
from .fetcher import DEFAULT_TIMEOUT, fetch_payload
from .models import NewsSummary
from .shaper import select_articles, shape_headlines

logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def structure_news_data(payload: Any) -> Optional[NewsSummary]:
    """
    Reduce a NewsAPI response body to a NewsSummary.

    Returns None when the payload carries no articles. Only the first ten articles
    are considered, both for theme counting and for headlines.
    """
    if not isinstance(payload, dict):
        return None
    articles = payload.get("articles")
    if not isinstance(articles, list) or not articles:
        return None

    selected = select_articles(articles)
    return NewsSummary(
        article_count=len(selected),
        themes=extract_themes(selected),
        headlines=shape_headlines(selected),
        timestamp=_utc_timestamp(),
    )


def fetch_news_sentiment(
    config: Any,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Optional[NewsSummary]:
    """
    Fetch the latest macro/economic news and return an analysis-ready summary.

    Never raises: a missing credential, a non-success status, a malformed body or any
    transport error all yield None, so callers can simply skip news context this cycle.
    """
    try:
        api_key = get_api_key(config)
        if not api_key:
            logger.warning("NEWSAPI_KEY not configured")
            return None

        payload = fetch_payload(api_key, session=session, timeout=timeout)
        return structure_news_data(payload)
    except NewsAPIStatusError as e:
        logger.warning("%s", e)
        return None
    except Exception as e:  # graceful degradation: absent instead of an error
        logger.error("NewsAPI fetch failed: %s", e)
        return None
