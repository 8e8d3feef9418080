import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    KEEPALIVE_URLS: tuple[str, ...] = tuple(
        url.strip()
        for url in os.getenv("KEEPALIVE_URLS", "").split(",")
        if url.strip()
    )
    KEEPALIVE_TARGETS_PATH: str = os.getenv(
        "KEEPALIVE_TARGETS_PATH",
        str(Path(__file__).resolve().parents[1] / "targets.yml"),
    )
    KEEPALIVE_DRY_RUN: bool = _as_bool(os.getenv("KEEPALIVE_DRY_RUN"))
    KEEPALIVE_TIMEOUT_SECONDS: float = float(
        os.getenv("KEEPALIVE_TIMEOUT_SECONDS", "10")
    )
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
