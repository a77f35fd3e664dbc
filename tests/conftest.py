import json

import pytest


def make_article(title="Markets wrap", description=None, source="Reuters",
                 published_at="2024-01-01T00:00:00Z", url="https://example.com/a"):
    return {
        "title": title,
        "description": description,
        "source": {"id": None, "name": source},
        "publishedAt": published_at,
        "url": url,
    }


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._body


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def article():
    return make_article


@pytest.fixture
def config():
    return {"NEWSAPI_KEY": "test-key"}
