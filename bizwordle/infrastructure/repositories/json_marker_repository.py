# bizwordle/infrastructure/repositories/json_marker_repository.py
from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from bizwordle.application.ports import MarkerRepository

_log = logging.getLogger("bizwordle.marker")


class JsonMarkerRepository(MarkerRepository):
    """
    Persists the 'has played before' flag as a tiny JSON file:
        {"has_played": true, "updated_at": "2025-01-01T00:00:00+00:00"}
    A missing or unreadable file counts as never played.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def has_played(self) -> bool:
        if not self.path.exists():
            return False
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            _log.debug("Ignoring unreadable marker %s: %s", self.path, e)
            return False
        return isinstance(payload, dict) and payload.get("has_played") is True

    def mark_played(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "has_played": True,
            "updated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        }
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

