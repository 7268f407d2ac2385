"""Append-only JSONL audit trail for committed price-term changes."""

from __future__ import annotations

import json
import threading
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..terms import PriceTerm


@dataclass(frozen=True)
class AuditEntry:
    """One committed change: what happened to which record, and the term it held."""

    action: str
    owner_key: str
    record_id: int
    cadence: Optional[str]
    term: Optional[PriceTerm] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_json(self) -> str:
        row: Dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "action": self.action,
            "owner_key": self.owner_key,
            "record_id": self.record_id,
            "cadence": self.cadence,
            "term": asdict(self.term) if self.term is not None else None,
        }
        return json.dumps(row, ensure_ascii=False)


class AuditTrail:
    """Writes AuditEntry rows to a JSONL file; a trail without a path is a no-op."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def append(self, entry: AuditEntry) -> None:
        if self.path is None:
            return
        line = entry.to_json() + "\n"
        # one writer at a time so concurrent commits never interleave a line
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line)


def build_audit_trail(path: Path | str | None) -> AuditTrail:
    return AuditTrail(Path(path)) if path else AuditTrail()


__all__ = ["AuditEntry", "AuditTrail", "build_audit_trail"]
