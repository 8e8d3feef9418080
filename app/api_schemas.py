from __future__ import annotations

from typing import Literal
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    url_count: int = Field(ge=0)
    targets_path: str
    dry_run: bool
    timeout_s: float = Field(gt=0)


class PingRequest(BaseModel):
    urls: list[str] = Field(description="Urls to ping, in order")
    dry_run: bool = Field(default=False, description="Skip network calls")


class PingResultResponse(BaseModel):
    url: str
    status: int | Literal["skipped", "error"] = Field(
        description="HTTP status code, 'skipped' on dry run, 'error' on transport failure"
    )
    data: str = Field(
        description="Response body, 'dry run', or the transport error message"
    )
