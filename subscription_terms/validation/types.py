from __future__ import annotations

from dataclasses import dataclass
from typing import List

MISSING_REQUIRED_FIELD = "missing_required_field"
INVALID_DURATION = "invalid_duration"
INVALID_CADENCE = "invalid_cadence"
DURATION_SHORTER_THAN_CYCLE = "duration_shorter_than_cycle"
MISSING_PRICE = "missing_price"

BASE_FIELD = "base"


@dataclass(frozen=True)
class ValidationFailure:
    field: str  # term field name, or "base" for whole-term problems
    kind: str  # one of the kind constants above
    message: str


@dataclass(frozen=True)
class PricingContext:
    """Capability flags of the unit that owns a term."""

    requires_recurring_billing: bool = False
    amount_required_without_cadence: bool = False

    @classmethod
    def for_product(cls, is_recurring_billing: bool) -> "PricingContext":
        return cls(requires_recurring_billing=is_recurring_billing)

    @classmethod
    def for_tier(cls) -> "PricingContext":
        return cls(amount_required_without_cadence=True)


class PriceTermInvalid(ValueError):
    """Raised by a repository to refuse committing a term that failed validation."""

    def __init__(self, failures: List[ValidationFailure]):
        self.failures = list(failures)
        detail = "; ".join(f"{f.field}: {f.message}" for f in self.failures)
        super().__init__(f"Price term is not valid: {detail}")
