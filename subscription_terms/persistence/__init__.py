from .audit import AuditEntry, AuditTrail, build_audit_trail
from .repository import (
    CREATED,
    DELETED,
    REPLACED,
    CommitEvent,
    CommitListener,
    InMemoryPriceTermRepository,
    PriceTermRepository,
    StoredPriceTerm,
)

__all__ = [
    "AuditEntry",
    "AuditTrail",
    "build_audit_trail",
    "CommitEvent",
    "CommitListener",
    "InMemoryPriceTermRepository",
    "PriceTermRepository",
    "StoredPriceTerm",
    "CREATED",
    "REPLACED",
    "DELETED",
]
