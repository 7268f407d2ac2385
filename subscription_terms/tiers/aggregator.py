from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..config import ONGOING_LABEL
from ..recurrence import RecurrenceCatalog, resolve_catalog
from ..terms import (
    MoneyFormatter,
    PriceTerm,
    format_money,
    price_formatted_without_symbol,
    suggested_price_formatted_without_symbol,
)


class TierPricing:
    """Per-cadence view over the price terms of one sellable unit.

    A unit carries at most one term per cadence (one-time counts as a cadence
    of its own), so construction rejects duplicates.
    """

    def __init__(
        self,
        terms: Iterable[PriceTerm],
        catalog: Optional[RecurrenceCatalog] = None,
        formatter: MoneyFormatter = format_money,
    ):
        self.catalog = catalog
        self.formatter = formatter
        self._by_cadence: Dict[Optional[str], PriceTerm] = {}
        for term in terms:
            if term.cadence in self._by_cadence:
                raise ValueError(f"Duplicate price term for cadence {term.cadence!r}")
            self._by_cadence[term.cadence] = term

    @property
    def terms(self) -> List[PriceTerm]:
        return list(self._by_cadence.values())

    def term_for(self, cadence: Optional[str]) -> Optional[PriceTerm]:
        return self._by_cadence.get(cadence)

    def _ordered_cadences(self) -> List[str]:
        # catalog order first; cadences the catalog does not know keep insertion order
        present = [c for c in self._by_cadence if c is not None]
        known = [c for c in resolve_catalog(self.catalog).allowed_cadences() if c in self._by_cadence]
        return known + [c for c in present if c not in known]

    def values_by_cadence(self, for_edit: bool = False) -> Dict[str, Dict[str, Any]]:
        out: Dict[str, Dict[str, Any]] = {}
        for cadence in self._ordered_cadences():
            term = self._by_cadence[cadence]
            entry: Dict[str, Any] = {
                "enabled": True,
                "price_cents": term.amount_minor_units,
                "price": price_formatted_without_symbol(term, self.formatter),
                "suggested_price_cents": term.suggested_amount_minor_units,
                "suggested_price": suggested_price_formatted_without_symbol(term, self.formatter),
            }
            if term.has_fixed_duration():
                entry["fixed_duration_months"] = term.fixed_duration_months
                entry["duration_display"] = term.duration_display()
            if for_edit:
                entry["duration_display_name"] = term.duration_display_name
            out[cadence] = entry
        return out

    def has_fixed_duration_pricing(self) -> bool:
        return any(t.has_fixed_duration() for t in self._by_cadence.values())

    def duration_for_cadence(self, cadence: Optional[str]) -> Optional[int]:
        term = self.term_for(cadence)
        return term.fixed_duration_months if term else None

    def duration_display_for_cadence(self, cadence: Optional[str]) -> str:
        term = self.term_for(cadence)
        if term is None:
            return ONGOING_LABEL
        return term.duration_display()
