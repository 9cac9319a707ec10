"""Client for the external WebID search endpoint."""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from constants import (
    ACCEPT_FORMATS,
    DEFAULT_TIMEOUT,
    SEARCH_FAILED_MESSAGE,
    SEARCH_UNAVAILABLE_MESSAGE,
)
from http_client import build_session
from models import SearchHit, SearchResults

__all__ = ["SearchError", "SearchClient", "encode_query"]

logger = logging.getLogger(__name__)

JSON_FORMAT = "application/json"


class SearchError(Exception):
    """A search failed; the message is safe to show to the user."""


def encode_query(query: str) -> str:
    """Percent-encode a query the way `encodeURIComponent` does."""
    return quote(query, safe="-_.!~*'()")


def _parse_hit(raw: Any) -> SearchHit:
    if not isinstance(raw, dict) or not isinstance(raw.get("webid"), str):
        raise SearchError("Invalid response from search service")
    img = raw.get("img")
    return {
        "webid": raw["webid"],
        "name": str(raw.get("name") or raw["webid"]),
        "img": img if isinstance(img, str) and img else None,
    }


class SearchClient:
    """Issue lookups against `GET <endpoint>?q=<query>`."""

    def __init__(
        self,
        endpoint: str,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or build_session()

    def build_url(self, query: str) -> str:
        return f"{self.endpoint}?q={encode_query(query)}"

    def fetch(self, query: str, accept: str = JSON_FORMAT) -> requests.Response:
        """Return the raw response for one of the supported encodings."""
        if accept not in ACCEPT_FORMATS:
            raise ValueError(f"Unsupported response format: {accept}")
        return self._session.get(
            self.build_url(query),
            headers={"Accept": accept},
            timeout=self.timeout,
        )

    def search(self, query: str) -> SearchResults:
        """Run a JSON search, raising `SearchError` on any failure."""
        try:
            resp = self.fetch(query)
        except requests.exceptions.RequestException as exc:
            logger.warning("Search request for %r failed: %s", query, exc)
            raise SearchError(SEARCH_UNAVAILABLE_MESSAGE) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            if not 200 <= resp.status_code < 300:
                raise SearchError(SEARCH_FAILED_MESSAGE) from exc
            raise SearchError("Invalid response from search service") from exc

        if not 200 <= resp.status_code < 300:
            message = data.get("error") if isinstance(data, dict) else None
            raise SearchError(str(message or SEARCH_FAILED_MESSAGE))

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise SearchError("Invalid response from search service")
        hits: List[SearchHit] = [_parse_hit(raw) for raw in data["results"]]
        count = data.get("count")
        return {
            "query": str(data.get("query", query)),
            "count": count if isinstance(count, int) else len(hits),
            "results": hits,
        }

    def close(self) -> None:
        self._session.close()
