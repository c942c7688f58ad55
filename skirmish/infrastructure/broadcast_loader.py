from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from ..domain import StatKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BroadcastTarget:
    destination: str
    stat: StatKey
    season_id: str | None = None


def load_broadcast_targets(path: str) -> list[BroadcastTarget]:
    p = Path(path)
    if not p.exists():
        logger.info("No broadcast targets file at %s, leaderboard broadcast disabled", path)
        return []

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if not isinstance(data, dict) or "targets" not in data:
        raise RuntimeError("Invalid broadcast targets format")

    entries = data["targets"] or []
    if not isinstance(entries, list):
        raise RuntimeError("targets must be a list")

    targets = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise RuntimeError(f"Invalid broadcast target: {entry}")
        destination = str(entry.get("chat_id") or "").strip()
        stat_raw = entry.get("stat")
        if not destination or not stat_raw:
            raise RuntimeError(f"Invalid broadcast target: {entry}")
        try:
            stat = StatKey.parse(str(stat_raw))
        except ValueError as exc:
            raise RuntimeError(f"Invalid broadcast target: {entry}") from exc
        season = str(entry.get("season") or "").strip() or None
        targets.append(BroadcastTarget(destination=destination, stat=stat, season_id=season))
    return targets
