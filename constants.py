"""Shared configuration constants for the application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_TIMEOUT = 10
USER_AGENT = "WebIDSearchCrawler/0.1 (+https://github.com/jeswr/webid-search)"

RDF_ACCEPT = "text/turtle, application/ld+json, application/rdf+xml"

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"

DEFAULT_SOURCES: List[str] = [
    "https://www.w3.org/People/Berners-Lee/card#i",
    "https://timbl.inrupt.net/profile/card#me",
]

DATA_FILE = Path(os.getenv("WEBID_DATA_FILE", str(BASE_DIR / "data" / "webids.json")))
SOURCES_FILE = Path(os.getenv("WEBID_SOURCES_FILE", "webid_sources.txt"))

SEARCH_API_URL = os.getenv(
    "WEBID_SEARCH_API_URL",
    "https://webid-search.vercel.app/api/search",
)
SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "webid-search-dev")

# Accept header -> label shown in the API documentation modal.
ACCEPT_FORMATS: Dict[str, str] = {
    "application/json": "Simple JSON (default)",
    "application/ld+json": "JSON-LD with context",
    "text/turtle": "RDF Turtle",
}

EMPTY_QUERY_MESSAGE = "Please enter a search query"
SEARCH_FAILED_MESSAGE = "Search failed"
SEARCH_UNAVAILABLE_MESSAGE = "Search service unavailable"

_EXPORTED_NAMES = (
    "BASE_DIR",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "RDF_ACCEPT",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "DEFAULT_SOURCES",
    "DATA_FILE",
    "SOURCES_FILE",
    "SEARCH_API_URL",
    "SECRET_KEY",
    "ACCEPT_FORMATS",
    "EMPTY_QUERY_MESSAGE",
    "SEARCH_FAILED_MESSAGE",
    "SEARCH_UNAVAILABLE_MESSAGE",
)

__all__ = [name for name in _EXPORTED_NAMES if name in globals()]
