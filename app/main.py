import logging

import yaml
from fastapi import FastAPI, HTTPException, Query

from app.api_schemas import (
    ConfigResponse,
    HealthResponse,
    PingRequest,
    PingResultResponse,
)
from app.checks.results import PingResult
from app.config import settings
from app.pinger import NO_URLS_MESSAGE, ping
from app.registry import configured_dry_run, configured_urls, load_targets
from app.runner import run_once

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Keep-Alive Pinger",
    version="1.0.0",
    description=(
        "Sends one GET to each url in order so idle hosted services stay awake, "
        "and returns the status or error recorded for each."
    ),
)


def _targets_error(exc: Exception) -> HTTPException:
    logger.error("Failed to load targets file: %s", exc)
    return HTTPException(status_code=500, detail=f"Invalid targets file: {exc}")


def _response(results: list[PingResult] | None) -> list[dict]:
    if results is None:
        raise HTTPException(status_code=400, detail=NO_URLS_MESSAGE)
    return [r.to_dict() for r in results]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns non-secret runtime config values.",
)
def config():
    try:
        targets = load_targets()
    except (ValueError, yaml.YAMLError) as exc:
        raise _targets_error(exc) from exc
    return {
        "url_count": len(configured_urls(targets)),
        "targets_path": settings.KEEPALIVE_TARGETS_PATH,
        "dry_run": configured_dry_run(targets),
        "timeout_s": settings.KEEPALIVE_TIMEOUT_SECONDS,
    }


@app.get(
    "/api/ping",
    response_model=list[PingResultResponse],
    tags=["ping"],
    summary="Ping Configured Urls",
    description="Pings KEEPALIVE_URLS and targets.yml urls once, in order.",
)
def ping_configured(
    dry_run: bool | None = Query(
        default=None,
        description="Override the configured dry-run flag",
    )
):
    try:
        results = run_once(dry_run=dry_run)
    except (ValueError, yaml.YAMLError) as exc:
        raise _targets_error(exc) from exc
    return _response(results)


@app.post(
    "/api/ping",
    response_model=list[PingResultResponse],
    tags=["ping"],
    summary="Ping Given Urls",
    description="Pings the urls in the request body once, in order.",
)
def ping_urls(request: PingRequest):
    results = ping(
        request.urls,
        dry_run=request.dry_run,
        timeout_s=settings.KEEPALIVE_TIMEOUT_SECONDS,
    )
    return _response(results)
