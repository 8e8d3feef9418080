from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

SKIPPED = "skipped"
ERROR = "error"
DRY_RUN_DATA = "dry run"


@dataclass(frozen=True)
class Success:
    code: int
    body: str


@dataclass(frozen=True)
class Skipped:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


PingStatus = Union[Success, Skipped, Failed]


@dataclass(frozen=True)
class PingResult:
    url: str
    outcome: PingStatus

    @property
    def status(self) -> int | str:
        if isinstance(self.outcome, Success):
            return self.outcome.code
        if isinstance(self.outcome, Skipped):
            return SKIPPED
        return ERROR

    @property
    def data(self) -> str:
        if isinstance(self.outcome, Success):
            return self.outcome.body
        if isinstance(self.outcome, Skipped):
            return DRY_RUN_DATA
        return self.outcome.message

    @property
    def ok(self) -> bool:
        return not isinstance(self.outcome, Failed)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "status": self.status, "data": self.data}
