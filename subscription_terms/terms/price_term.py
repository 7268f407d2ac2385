from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..recurrence import RecurrenceCatalog
from .duration import duration_display, formatted_duration_with_recurrence, occurrence_count


@dataclass(frozen=True)
class PriceTerm:
    """One billing offer for one sellable unit.

    cadence=None is a one-time sale; fixed_duration_months=None recurs
    indefinitely. Field values are not checked here: run validate() before
    treating a term as billable.
    """

    amount_minor_units: Optional[int]
    currency: Optional[str]
    cadence: Optional[str] = None
    fixed_duration_months: Optional[int] = None
    duration_display_name: Optional[str] = None
    suggested_amount_minor_units: Optional[int] = None
    is_rental: bool = False

    @classmethod
    def from_mapping(cls, data: Dict[str, Any], *, currency: Optional[str] = None) -> "PriceTerm":
        """Build a term from a plain field set (seed files, stored rows).

        Accepts the stored column names (price_cents, recurrence) as aliases.
        """

        def pick(*keys: str) -> Any:
            for k in keys:
                if data.get(k) is not None:
                    return data[k]
            return None

        return cls(
            amount_minor_units=pick("amount_minor_units", "price_cents"),
            currency=pick("currency") or currency,
            cadence=pick("cadence", "recurrence"),
            fixed_duration_months=pick("fixed_duration_months"),
            duration_display_name=pick("duration_display_name"),
            suggested_amount_minor_units=pick("suggested_amount_minor_units", "suggested_price_cents"),
            is_rental=bool(data.get("is_rental", False)),
        )

    def with_changes(self, **changes: Any) -> "PriceTerm":
        return replace(self, **changes)

    def has_fixed_duration(self) -> bool:
        return self.fixed_duration_months is not None

    def is_recurring(self) -> bool:
        return self.cadence is not None

    def is_buy(self) -> bool:
        return not self.is_rental

    def is_default_recurrence(self, default_cadence: Optional[str]) -> bool:
        if self.cadence is None or default_cadence is None:
            return False
        return self.cadence == str(default_cadence)

    def charge_occurrence_count(self, catalog: Optional[RecurrenceCatalog] = None) -> Optional[int]:
        return occurrence_count(self.cadence, self.fixed_duration_months, catalog)

    def duration_display(self) -> str:
        return duration_display(self.fixed_duration_months, self.duration_display_name)

    def formatted_duration_with_recurrence(self, catalog: Optional[RecurrenceCatalog] = None) -> str:
        return formatted_duration_with_recurrence(
            self.cadence, self.fixed_duration_months, self.duration_display_name, catalog
        )
