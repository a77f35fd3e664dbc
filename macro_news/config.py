from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

API_KEY_NAME = "NEWSAPI_KEY"


def load_env_config(dotenv_path: Optional[str] = None) -> Mapping[str, str]:
    """
    Load a `.env` file (if any) into the process environment and return it.

    Existing environment variables win over values from the file.
    """
    load_dotenv(dotenv_path)
    return os.environ


def get_api_key(config: Any) -> Optional[str]:
    """
    Look up the NewsAPI credential on a config source.

    Accepts a mapping (`os.environ`, a plain dict) or any object exposing a
    `NEWSAPI_KEY` attribute. Missing, empty and whitespace-only values all map to None.
    """
    if config is None:
        return None
    if isinstance(config, Mapping):
        value = config.get(API_KEY_NAME)
    else:
        value = getattr(config, API_KEY_NAME, None)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
