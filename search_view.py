"""State behind the search page."""

from __future__ import annotations

from typing import Optional

from constants import EMPTY_QUERY_MESSAGE
from models import SearchResults
from search_client import SearchClient, SearchError

__all__ = ["SearchView"]


class SearchView:
    """Query, results, loading flag, error message and modal visibility.

    `loading` is only observable by callers that drive `start` and
    `complete` themselves; a rendered page always sees a finished search.

    Each search gets a sequence token from `start`; `complete` drops the
    outcome of any search that is no longer the most recently issued one.
    """

    def __init__(self, query: str = "", show_info: bool = False) -> None:
        self.query = query
        self.show_info = show_info
        self.results: Optional[SearchResults] = None
        self.loading = False
        self.error: Optional[str] = None
        self._latest_token = 0

    def start(self, query: str) -> int:
        self._latest_token += 1
        self.query = query
        self.loading = True
        self.error = None
        return self._latest_token

    def complete(
        self,
        token: int,
        results: Optional[SearchResults] = None,
        error: Optional[str] = None,
    ) -> bool:
        """Apply a search outcome; return False if it was superseded."""
        if token != self._latest_token:
            return False
        self.loading = False
        if error is not None:
            self.error = error
            self.results = None
        else:
            self.error = None
            self.results = results
        return True

    def search(self, client: SearchClient, query: str) -> bool:
        if not query.strip():
            self.results = None
            return False
        token = self.start(query)
        try:
            results = client.search(query)
        except SearchError as exc:
            return self.complete(token, error=str(exc))
        return self.complete(token, results=results)

    def reject_empty(self) -> None:
        self.error = EMPTY_QUERY_MESSAGE

    @property
    def result_label(self) -> str:
        if self.results is None:
            return ""
        count = self.results["count"]
        suffix = "" if count == 1 else "s"
        return f'Found {count} result{suffix} for "{self.results["query"]}"'
