import pytest

from macro_news.models import Headline
from macro_news.shaper import select_articles, shape_headlines, to_headline

from .conftest import make_article


def test_select_keeps_first_ten_in_order():
    articles = [make_article(url=f"u{i}") for i in range(12)]
    selected = select_articles(articles)
    assert [a["url"] for a in selected] == [f"u{i}" for i in range(10)]


def test_select_shorter_list_untouched():
    articles = [make_article(url="u0"), make_article(url="u1")]
    assert select_articles(articles) == articles


def test_to_headline_projects_fields():
    raw = make_article(title="Fed holds", description="ignored", source="X",
                       published_at="2024-01-01T00:00:00Z", url="u1")
    assert to_headline(raw) == Headline(title="Fed holds", source="X",
                                        published_at="2024-01-01T00:00:00Z", url="u1")


def test_to_headline_requires_source():
    raw = make_article()
    del raw["source"]
    with pytest.raises(KeyError):
        to_headline(raw)


def test_shape_headlines_preserves_order():
    articles = [make_article(url="b"), make_article(url="a")]
    assert [h.url for h in shape_headlines(articles)] == ["b", "a"]


def test_headline_to_dict_uses_wire_keys():
    h = Headline(title="t", source="s", published_at="p", url="u")
    assert h.to_dict() == {"title": "t", "source": "s", "publishedAt": "p", "url": "u"}


def test_to_headline_source_without_name():
    raw = make_article(url="u1")
    raw["source"] = {"id": "x"}
    assert to_headline(raw).source is None
