"""Repository seam for price terms.

The core never persists anything itself. Callers go through a
PriceTermRepository, which validates before committing, keeps soft-deleted
history, and tells subscribers (e.g. a product cache) after every commit.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol

from .. import config
from ..recurrence import RecurrenceCatalog
from ..terms import PriceTerm
from ..validation import PriceTermInvalid, PricingContext, validate
from .audit import AuditEntry, AuditTrail, build_audit_trail

_LOGGER = logging.getLogger(__name__)

CREATED = "created"
REPLACED = "replaced"
DELETED = "deleted"


@dataclass(frozen=True)
class StoredPriceTerm:
    record_id: int
    owner_key: str
    term: PriceTerm
    created_at: datetime
    deleted_at: Optional[datetime] = None

    def is_active(self) -> bool:
        return self.deleted_at is None


@dataclass(frozen=True)
class CommitEvent:
    action: str  # "created" | "replaced" | "deleted"
    owner_key: str
    record_id: int
    cadence: Optional[str]


CommitListener = Callable[[CommitEvent], None]


class PriceTermRepository(Protocol):
    def save(self, owner_key: str, term: PriceTerm, context: PricingContext) -> StoredPriceTerm: ...

    def find_active(
        self, owner_key: str, *, fixed_duration: Optional[bool] = None, rental: Optional[bool] = None
    ) -> List[PriceTerm]: ...

    def soft_delete(self, owner_key: str, cadence: Optional[str]) -> bool: ...


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryPriceTermRepository:
    """Process-local repository; at most one active term per (owner, cadence)."""

    def __init__(self, catalog: Optional[RecurrenceCatalog] = None, audit: Optional[AuditTrail] = None):
        self.catalog = catalog
        self.audit = audit if audit is not None else build_audit_trail(config.AUDIT_FILE)
        self._records: List[StoredPriceTerm] = []
        self._listeners: List[CommitListener] = []
        self._lock = threading.Lock()
        self._next_id = 1

    def subscribe(self, listener: CommitListener) -> None:
        self._listeners.append(listener)

    def _notify(self, event: CommitEvent) -> None:
        _LOGGER.debug("Dispatching %s for %s to %d listener(s)", event.action, event.owner_key, len(self._listeners))
        for listener in list(self._listeners):
            listener(event)

    def _publish(self, entry: AuditEntry) -> None:
        # the change is already committed; subscribers hear about it even if the audit write fails
        try:
            self.audit.append(entry)
        finally:
            self._notify(CommitEvent(entry.action, entry.owner_key, entry.record_id, entry.cadence))

    def _active_index(self, owner_key: str, cadence: Optional[str]) -> Optional[int]:
        for i, rec in enumerate(self._records):
            if rec.owner_key == owner_key and rec.is_active() and rec.term.cadence == cadence:
                return i
        return None

    def save(self, owner_key: str, term: PriceTerm, context: PricingContext) -> StoredPriceTerm:
        failures = validate(term, context, self.catalog)
        if failures:
            _LOGGER.info("Refusing to save price term for %s: %d failure(s)", owner_key, len(failures))
            raise PriceTermInvalid(failures)

        with self._lock:
            now = _now()
            action = CREATED
            idx = self._active_index(owner_key, term.cadence)
            if idx is not None:
                self._records[idx] = replace(self._records[idx], deleted_at=now)
                action = REPLACED
            stored = StoredPriceTerm(record_id=self._next_id, owner_key=owner_key, term=term, created_at=now)
            self._next_id += 1
            self._records.append(stored)

        _LOGGER.info("Saved price term %d for %s (%s, cadence=%s)", stored.record_id, owner_key, action, term.cadence)
        self._publish(AuditEntry(action, owner_key, stored.record_id, term.cadence, term))
        return stored

    def find_active(
        self, owner_key: str, *, fixed_duration: Optional[bool] = None, rental: Optional[bool] = None
    ) -> List[PriceTerm]:
        with self._lock:
            records = [r for r in self._records if r.owner_key == owner_key and r.is_active()]
        out: List[PriceTerm] = []
        for r in records:
            if fixed_duration is not None and r.term.has_fixed_duration() != fixed_duration:
                continue
            if rental is not None and r.term.is_rental != rental:
                continue
            out.append(r.term)
        return out

    def soft_delete(self, owner_key: str, cadence: Optional[str]) -> bool:
        with self._lock:
            idx = self._active_index(owner_key, cadence)
            if idx is None:
                return False
            stored = replace(self._records[idx], deleted_at=_now())
            self._records[idx] = stored

        _LOGGER.info("Soft-deleted price term %d for %s", stored.record_id, owner_key)
        self._publish(AuditEntry(DELETED, owner_key, stored.record_id, cadence, stored.term))
        return True

    def history(self, owner_key: str) -> List[StoredPriceTerm]:
        with self._lock:
            return [r for r in self._records if r.owner_key == owner_key]
