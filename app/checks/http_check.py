from __future__ import annotations

import requests

from app.checks.results import Failed, Success

DEFAULT_TIMEOUT_S = 10.0


def run_http(url: str, timeout_s: float = DEFAULT_TIMEOUT_S) -> Success | Failed:
    # Any response counts, whatever its status code.
    try:
        r = requests.get(url, timeout=timeout_s)
    except Exception as e:
        return Failed(message=str(e) or e.__class__.__name__)
    return Success(code=r.status_code, body=r.text)
