from __future__ import annotations

import json
from typing import Any, Iterable

from app.checks.results import Failed, PingResult, Skipped


def result_log_args(result: PingResult) -> tuple[str, tuple[Any, ...]]:
    """Log format string and its arguments for one result."""
    if isinstance(result.outcome, Skipped):
        return "DRY RUN: Would ping %s", (result.url,)
    if isinstance(result.outcome, Failed):
        return "Error pinging %s: %s", (result.url, result.outcome.message)
    return (
        "Keep alive ping for %s: Status %s, Data: %s",
        (result.url, result.outcome.code, result.outcome.body),
    )


def results_to_json(results: Iterable[PingResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2)
