"""Command-line entry point refreshing the WebID liveness snapshot."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from constants import DATA_FILE, DEFAULT_SOURCES, DEFAULT_TIMEOUT, SOURCES_FILE
from crawler import read_sources, run_refresh

logger = logging.getLogger("crawl_webids")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Check that a list of WebID profile documents is reachable and save a JSON snapshot."
    )
    p.add_argument("--sources", "-s", help="Text file with one WebID URL per line.")
    p.add_argument("--output", "-o", default=str(DATA_FILE), help=f"Snapshot file (default: {DATA_FILE}).")
    p.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT, help="HTTP timeout in seconds (default: 10).")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def resolve_sources(sources_arg: Optional[str]) -> List[str]:
    if sources_arg:
        path = Path(sources_arg)
        if not path.exists():
            raise SystemExit(f"Sources file not found: {path}")
        return read_sources(path)
    # fall back to defaults when the configured file is absent or empty
    return read_sources(SOURCES_FILE) or list(DEFAULT_SOURCES)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sources = resolve_sources(args.sources)
    try:
        run_refresh(sources, path=Path(args.output), timeout=args.timeout)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Crawler failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
