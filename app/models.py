from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field


class TargetFile(BaseModel):
    dry_run: bool = False
    urls: List[str] = Field(default_factory=list)
