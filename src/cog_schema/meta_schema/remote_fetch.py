"""Remote document retrieval."""

from __future__ import annotations

from collections.abc import Callable

import requests

TextFetcher = Callable[[str], str]

DEFAULT_TIMEOUT_SECONDS = 30


def fetch_text(url: str, *, timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Return the body of `url` as text."""
    response = requests.get(url, timeout=timeout_seconds)
    response.raise_for_status()
    return response.text
