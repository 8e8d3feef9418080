from __future__ import annotations

import argparse
import logging
import sys

from app.checks.results import PingResult
from app.config import settings
from app.pinger import PingObserver, ping
from app.registry import configured_dry_run, configured_urls, load_targets

logger = logging.getLogger(__name__)


def run_once(
    dry_run: bool | None = None,
    observer: PingObserver | None = None,
) -> list[PingResult] | None:
    targets = load_targets()
    urls = configured_urls(targets)
    if dry_run is None:
        dry_run = configured_dry_run(targets)

    return ping(
        urls,
        dry_run=dry_run,
        timeout_s=settings.KEEPALIVE_TIMEOUT_SECONDS,
        observer=observer,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="keepalive-pinger",
        description="Ping every configured url once and exit.",
    )
    parser.add_argument(
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Record every url as skipped without sending requests "
        "(default: KEEPALIVE_DRY_RUN or targets.yml)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    results = run_once(dry_run=args.dry_run)
    if results is None:
        return 1
    failed = sum(1 for r in results if not r.ok)
    logger.info("Pinged %d url(s), %d failed", len(results), failed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
