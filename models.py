"""Data structures used across the application."""

from __future__ import annotations

from typing import List, NamedTuple, Optional, TypedDict


class _WebIDEntryBase(TypedDict):
    url: str
    lastUpdated: str
    status: str


class WebIDEntry(_WebIDEntryBase, total=False):
    """Latest probe outcome for a single identity document URL."""

    name: str


class Snapshot(TypedDict):
    """Complete set of probe results persisted at one point in time."""

    lastCrawl: str
    entries: List[WebIDEntry]


class LoadResult(NamedTuple):
    """Snapshot read from disk, flagged when an empty fallback was used."""

    snapshot: Snapshot
    fallback: bool
    error: Optional[str] = None


class SearchHit(TypedDict):
    webid: str
    name: str
    img: Optional[str]


class SearchResults(TypedDict):
    """Body returned by the search endpoint for a JSON request."""

    query: str
    count: int
    results: List[SearchHit]


__all__ = ["WebIDEntry", "Snapshot", "LoadResult", "SearchHit", "SearchResults"]
