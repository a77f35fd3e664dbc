from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Headline:
    """
    Minimal projection of a provider article, used for display.
    """
    title: Optional[str]
    source: Optional[str]
    published_at: Optional[str]
    url: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "source": self.source,
            "publishedAt": self.published_at,
            "url": self.url,
        }


@dataclass(frozen=True)
class NewsSummary:
    """
    Stable public model returned by `fetch_news_sentiment`.

    WARNING: Do not change fields lightly. `to_dict` is the wire shape consumers read.
    """
    article_count: int
    timestamp: str
    themes: Tuple[str, ...] = field(default_factory=tuple)
    headlines: Tuple[Headline, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articleCount": self.article_count,
            "themes": list(self.themes),
            "headlines": [h.to_dict() for h in self.headlines],
            "timestamp": self.timestamp,
        }
