from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from .models import Headline

MAX_HEADLINES = 10


def select_articles(articles: Sequence[Mapping[str, Any]], limit: int = MAX_HEADLINES) -> List[Mapping[str, Any]]:
    """First `limit` articles in provider order (newest first, as requested)."""
    return list(articles[:limit])


def to_headline(article: Mapping[str, Any]) -> Headline:
    """
    Project a raw provider article onto a Headline.

    Raises KeyError/AttributeError when the article has no `source` object; callers
    treat that as a malformed payload.
    """
    return Headline(
        title=article.get("title"),
        source=article["source"].get("name"),
        published_at=article.get("publishedAt"),
        url=article.get("url"),
    )


def shape_headlines(articles: Sequence[Mapping[str, Any]]) -> Tuple[Headline, ...]:
    return tuple(to_headline(a) for a in articles)
