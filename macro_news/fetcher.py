from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .exceptions import MalformedPayloadError, NewsAPIStatusError

BASE_URL = "https://newsapi.org/v2/everything"
MACRO_QUERY = "economy OR federal reserve OR inflation OR GDP OR markets"
PAGE_SIZE = 20
DEFAULT_TIMEOUT = 10.0


def build_params(api_key: str) -> Dict[str, Any]:
    """Query parameters focused on macro/business news, newest first."""
    return {
        "q": MACRO_QUERY,
        "language": "en",
        "sortBy": "publishedAt",
        "pageSize": PAGE_SIZE,
        "apiKey": api_key,
    }


def fetch_payload(
    api_key: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    Run the macro query against NewsAPI and return the decoded JSON body.

    Raises NewsAPIStatusError on a non-success status and MalformedPayloadError when the
    body is JSON but not an object. Transport and JSON decode errors from requests are
    left to the caller.
    """
    if session is None:
        with requests.Session() as own:
            return fetch_payload(api_key, session=own, timeout=timeout)

    resp = session.get(BASE_URL, params=build_params(api_key), timeout=timeout)
    if not 200 <= resp.status_code < 300:
        raise NewsAPIStatusError(resp.status_code)

    data = resp.json()
    if not isinstance(data, dict):
        raise MalformedPayloadError(f"Expected a JSON object, got {type(data).__name__}")
    return data
