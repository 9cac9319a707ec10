"""Directory refresher: probe WebID documents and persist a liveness snapshot."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, cast

import requests

from constants import (
    DATA_FILE,
    DEFAULT_SOURCES,
    DEFAULT_TIMEOUT,
    RDF_ACCEPT,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from http_client import build_session
from models import LoadResult, Snapshot, WebIDEntry

__all__ = [
    "utc_timestamp",
    "parse_timestamp",
    "empty_snapshot",
    "read_sources",
    "load_existing",
    "probe",
    "probe_sources",
    "summarize",
    "store_snapshot",
    "run_refresh",
]

logger = logging.getLogger(__name__)


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a UTC instant as ISO-8601 with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Inverse of `utc_timestamp`."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def empty_snapshot() -> Snapshot:
    return {"lastCrawl": utc_timestamp(), "entries": []}


def read_sources(input_path: Path) -> List[str]:
    """Load source URLs from a text file, one per line."""
    if not input_path.exists():
        return []
    lines = input_path.read_text(encoding="utf-8").splitlines()
    return [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]


def _is_snapshot(raw: Any) -> bool:
    return (
        isinstance(raw, dict)
        and isinstance(raw.get("lastCrawl"), str)
        and isinstance(raw.get("entries"), list)
    )


def load_existing(path: Path = DATA_FILE) -> LoadResult:
    """Read the previous snapshot, falling back to an empty one on any failure."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("No existing snapshot at %s", path)
        return LoadResult(empty_snapshot(), fallback=True)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Error loading existing data from %s: %s", path, exc)
        return LoadResult(empty_snapshot(), fallback=True, error=str(exc))
    if not _is_snapshot(raw):
        logger.warning("Ignoring malformed snapshot at %s", path)
        return LoadResult(empty_snapshot(), fallback=True, error="malformed snapshot")
    return LoadResult(cast(Snapshot, raw), fallback=False)


def probe(session: requests.Session, url: str, timeout: int = DEFAULT_TIMEOUT) -> WebIDEntry:
    """Check whether an identity document answers with a 2xx status.

    Every failure (HTTP error status, timeout, TLS or connection problem,
    malformed URL) is reported as an inactive entry instead of raised.
    """
    status = STATUS_INACTIVE
    try:
        # the status line decides; the body is never downloaded
        resp = session.get(
            url,
            headers={"Accept": RDF_ACCEPT},
            timeout=timeout,
            allow_redirects=True,
            stream=True,
        )
        try:
            if 200 <= resp.status_code < 300:
                status = STATUS_ACTIVE
            else:
                logger.warning("Error checking %s: HTTP %s", url, resp.status_code)
        finally:
            resp.close()
    except requests.exceptions.Timeout as exc:
        logger.warning("Error checking %s: timeout (%s)", url, exc)
    except requests.exceptions.RequestException as exc:
        logger.warning("Error checking %s: %s", url, exc)
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error checking %s: unexpected %s: %s", url, type(exc).__name__, exc)

    return {"url": url, "lastUpdated": utc_timestamp(), "status": status}


def probe_sources(sources: Sequence[str], timeout: int = DEFAULT_TIMEOUT) -> List[WebIDEntry]:
    """Run `probe` on every source, one after the other, with a shared session."""
    if not sources:
        return []

    session = build_session()
    try:
        entries: List[WebIDEntry] = []
        for source in sources:
            logger.info("Checking: %s", source)
            entries.append(probe(session, source, timeout=timeout))
        return entries
    finally:
        session.close()


def summarize(entries: Sequence[WebIDEntry]) -> Tuple[int, int]:
    """Return the (active, inactive) counts."""
    active = sum(1 for entry in entries if entry["status"] == STATUS_ACTIVE)
    return active, len(entries) - active


def store_snapshot(snapshot: Snapshot, path: Path = DATA_FILE) -> None:
    """Overwrite the snapshot file, creating its directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")


def run_refresh(
    sources: Optional[Sequence[str]] = None,
    path: Path = DATA_FILE,
    timeout: int = DEFAULT_TIMEOUT,
) -> Snapshot:
    """Probe all sources, replace the on-disk snapshot and return the new one."""
    logger.info("Starting WebID crawler...")
    sources = list(DEFAULT_SOURCES if sources is None else sources)

    previous = load_existing(path)
    logger.debug(
        "Previous snapshot: %d entries, last crawl %s%s",
        len(previous.snapshot["entries"]),
        previous.snapshot["lastCrawl"],
        " (fallback)" if previous.fallback else "",
    )

    entries = probe_sources(sources, timeout=timeout)
    snapshot: Snapshot = {"lastCrawl": utc_timestamp(), "entries": entries}
    store_snapshot(snapshot, path)

    logger.info("Crawl completed. Found %d WebIDs.", len(entries))
    logger.info("Data saved to: %s", path)
    active, inactive = summarize(entries)
    logger.info("Active: %d, Inactive: %d", active, inactive)
    return snapshot
