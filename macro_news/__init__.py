"""
macro_news

Fetches the latest macro/economic headlines from NewsAPI.org and reduces them to a
small, analysis-ready summary.

Core ideas:
- Input: a config source holding NEWSAPI_KEY (os.environ, a dict, a secrets object)
- Process: fetch → select top 10 → classify themes (keyword match) → shape headlines
- Output: NewsSummary, or None when news is unavailable (never raises)

Example
-------
from macro_news import fetch_news_sentiment, load_env_config

summary = fetch_news_sentiment(load_env_config())

if summary is not None:
    print(summary.themes)
    for h in summary.headlines:
        print(h.published_at, h.source, h.title)
"""
from .models import Headline, NewsSummary
from .config import load_env_config
from .core import fetch_news_sentiment

__all__ = [
    "Headline",
    "NewsSummary",
    "fetch_news_sentiment",
    "load_env_config",
]
