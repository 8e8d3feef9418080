from __future__ import annotations

from pathlib import Path
import yaml

from app.config import settings
from app.models import TargetFile


def load_targets(path: Path | str | None = None) -> TargetFile:
    p = Path(path or settings.KEEPALIVE_TARGETS_PATH)
    if not p.exists():
        return TargetFile()

    data = yaml.safe_load(p.read_text()) or {}
    targets = TargetFile.model_validate(data)

    seen = set()
    for url in targets.urls:
        if url in seen:
            raise ValueError(f"Duplicate url in {p.name}: {url}")
        seen.add(url)

    return targets


def configured_urls(targets: TargetFile | None = None) -> list[str]:
    """
    Env urls first, then the target file, in their own order.
    A url listed in both places is pinged once.
    """
    if targets is None:
        targets = load_targets()

    out: list[str] = []
    for url in [*settings.KEEPALIVE_URLS, *targets.urls]:
        if url not in out:
            out.append(url)
    return out


def configured_dry_run(targets: TargetFile | None = None) -> bool:
    if targets is None:
        targets = load_targets()
    # Either source can switch dry run on.
    return settings.KEEPALIVE_DRY_RUN or targets.dry_run
