from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from app.checks.http_check import DEFAULT_TIMEOUT_S, run_http
from app.checks.results import Failed, PingResult, PingStatus, Skipped
from app.formatting import result_log_args, results_to_json

logger = logging.getLogger(__name__)

NO_URLS_MESSAGE = "No URLs provided!"

Fetch = Callable[[str, float], PingStatus]


class PingObserver:
    """Receives pinger events. Every hook is a no-op by default."""

    def on_invalid_input(self, urls: Any) -> None:
        pass

    def on_result(self, result: PingResult) -> None:
        pass

    def on_complete(self, results: list[PingResult]) -> None:
        pass


class LoggingObserver(PingObserver):
    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_invalid_input(self, urls: Any) -> None:
        self.log.error(NO_URLS_MESSAGE)

    def on_result(self, result: PingResult) -> None:
        fmt, args = result_log_args(result)
        level = logging.ERROR if isinstance(result.outcome, Failed) else logging.INFO
        self.log.log(level, fmt, *args)

    def on_complete(self, results: list[PingResult]) -> None:
        if self.log.isEnabledFor(logging.INFO):
            self.log.info("All ping results: %s", results_to_json(results))


def valid_urls(urls: Any) -> bool:
    if isinstance(urls, (str, bytes)) or not isinstance(urls, Sequence):
        return False
    if len(urls) == 0:
        return False
    return all(isinstance(u, str) for u in urls)


def ping(
    urls: Sequence[str],
    dry_run: bool = False,
    *,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    fetch: Fetch = run_http,
    observer: PingObserver | None = None,
) -> list[PingResult] | None:
    """
    GET each url in order, one at a time, and return one result per url.

    Returns None without touching the network when ``urls`` is not a
    non-empty sequence of strings. Transport errors are recorded as
    ``Failed`` results and never raised.
    """
    obs = observer if observer is not None else LoggingObserver()

    if not valid_urls(urls):
        obs.on_invalid_input(urls)
        return None

    results: list[PingResult] = []
    for url in urls:
        if dry_run:
            outcome: PingStatus = Skipped()
        else:
            outcome = fetch(url, timeout_s)
        result = PingResult(url=url, outcome=outcome)
        obs.on_result(result)
        results.append(result)

    obs.on_complete(results)
    return results
