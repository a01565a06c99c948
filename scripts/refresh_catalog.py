#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import assert_never

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from catalog.api.deps import build_repository
from catalog.core.config import settings
from catalog.core.result import Error, Result, Success
from catalog.db.session import engine, init_db
from catalog.schemas.catalog import ListSnapshot

logger = logging.getLogger("refresh_catalog")


def _format_summary(*, force: bool, snapshot: ListSnapshot, limit: int) -> list[str]:
    mode = "forced refresh" if force else "cache-first"
    lines = [
        "Movie catalog fetch complete",
        f"mode: {mode}",
        f"page: {snapshot.page} of {snapshot.total_pages}",
        f"total_results: {snapshot.total_results}",
        f"items: {len(snapshot.items)}",
    ]
    for item in snapshot.items[: max(0, limit)]:
        lines.append(f"  {item.id}\t{item.title or '(untitled)'}")
    return lines


def _exit_code(result: Result[ListSnapshot], *, force: bool, limit: int) -> int:
    if isinstance(result, Success):
        for line in _format_summary(force=force, snapshot=result.value, limit=limit):
            print(line)
        return 0
    if isinstance(result, Error):
        print(f"Movie catalog fetch failed: {result.message or 'unknown error'}", file=sys.stderr)
        return 1
    assert_never(result)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch the latest movie list into the local cache and print it."
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Refresh from TMDB even when a cached list exists.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of movies to print after the summary.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log request-level actions.")
    args = parser.parse_args(argv)

    if args.limit < 0:
        parser.error("--limit must be zero or greater")

    return args


async def _main_async(args: argparse.Namespace) -> Result[ListSnapshot]:
    await init_db()
    try:
        return await build_repository().fetch_list(force_refresh=args.force)
    finally:
        await engine.dispose()


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    result = asyncio.run(_main_async(args))
    return _exit_code(result, force=args.force, limit=args.limit)


if __name__ == "__main__":
    raise SystemExit(main())
