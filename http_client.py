"""HTTP session factory shared by the crawler and the search client."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from constants import USER_AGENT

__all__ = ["build_session"]


def build_session(retries: int = 0) -> requests.Session:
    """Create a configured `requests.Session` with a retry policy and headers.

    Probes are single-shot, so no retries happen unless asked for.
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=0.6,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=frozenset(["GET", "HEAD"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session
