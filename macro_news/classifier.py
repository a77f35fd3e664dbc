from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple


# Declaration order doubles as the tie-break order when ranking.
THEME_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("monetary_policy", ("fed", "federal reserve", "powell", "interest rates", "hawkish", "dovish", "policy")),
    ("inflation", ("inflation", "cpi", "prices", "pce", "deflation")),
    ("growth", ("gdp", "growth", "recession", "expansion", "contraction")),
    ("employment", ("jobs", "unemployment", "payrolls", "labor", "wages")),
    ("markets", ("stocks", "equities", "bonds", "yields", "volatility")),
)
THEMES: Tuple[str, ...] = tuple(theme for theme, _ in THEME_KEYWORDS)

MAX_THEMES = 3


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def article_text(article: Mapping[str, Any]) -> str:
    """Lowercased `title + " " + description`; missing parts count as empty."""
    title = article.get("title") or ""
    description = article.get("description") or ""
    return f"{title} {description}".lower()


def match_themes(text: str) -> List[str]:
    """Themes with at least one keyword in `text`, in declaration order."""
    return [theme for theme, keywords in THEME_KEYWORDS if _contains_any(text, keywords)]


def extract_themes(articles: Iterable[Mapping[str, Any]], *, limit: int = MAX_THEMES) -> Tuple[str, ...]:
    """
    Rank macro themes across `articles` by the number of articles mentioning them.

    A theme counts at most once per article, however many of its keywords match.
    Themes nobody mentions are left out.
    """
    counts: Dict[str, int] = {theme: 0 for theme in THEMES}
    for article in articles:
        for theme in match_themes(article_text(article)):
            counts[theme] += 1

    ranked = [theme for theme in THEMES if counts[theme] > 0]
    # sort() is stable, so equal counts keep THEMES order
    ranked.sort(key=lambda theme: counts[theme], reverse=True)
    return tuple(ranked[:limit])
