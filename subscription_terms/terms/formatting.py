"""Customer-facing projections of a PriceTerm.

All helpers are pure: they read the term, the catalog and the money formatter,
and return text or plain dicts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import DEFAULT_CURRENCY
from ..recurrence import RecurrenceCatalog, resolve_catalog
from .money import MoneyFormatter, format_money
from .price_term import PriceTerm


def _currency(term: PriceTerm) -> str:
    return term.currency or DEFAULT_CURRENCY


def price_formatted_without_symbol(term: PriceTerm, formatter: MoneyFormatter = format_money) -> str:
    if term.amount_minor_units is None:
        return ""
    return formatter(term.amount_minor_units, _currency(term), no_cents_if_whole=True, symbol=False)


def suggested_price_formatted_without_symbol(
    term: PriceTerm, formatter: MoneyFormatter = format_money
) -> Optional[str]:
    if term.suggested_amount_minor_units is None:
        return None
    return formatter(term.suggested_amount_minor_units, _currency(term), no_cents_if_whole=True, symbol=False)


def formatted_price_with_duration(
    term: PriceTerm,
    *,
    symbol: bool = True,
    formatter: MoneyFormatter = format_money,
    catalog: Optional[RecurrenceCatalog] = None,
) -> str:
    if term.amount_minor_units is None:
        return ""

    cat = resolve_catalog(catalog)
    text = formatter(term.amount_minor_units, _currency(term), no_cents_if_whole=True, symbol=symbol)
    if term.cadence is not None:
        text = f"{text} {cat.short_indicator(term.cadence)}"
    if term.has_fixed_duration():
        text = f"{text} for {term.formatted_duration_with_recurrence(cat)}"
    return text


def subscription_summary(
    term: PriceTerm,
    owner_display_name: str,
    *,
    symbol: bool = True,
    formatter: MoneyFormatter = format_money,
    catalog: Optional[RecurrenceCatalog] = None,
) -> str:
    price = formatted_price_with_duration(term, symbol=symbol, formatter=formatter, catalog=catalog)
    return f"{owner_display_name} - {price}"


def recurrence_formatted(term: PriceTerm, catalog: Optional[RecurrenceCatalog] = None) -> Optional[str]:
    """' a year x 2' style suffix shown next to a recurring price."""

    if term.cadence is None:
        return None

    cat = resolve_catalog(catalog)
    text = f" {cat.long_indicator(term.cadence)}"
    if term.has_fixed_duration():
        count = term.charge_occurrence_count(cat)
        if count is not None:
            text += f" x {count}"
    return text


def term_as_dict(term: PriceTerm, catalog: Optional[RecurrenceCatalog] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "price_cents": term.amount_minor_units,
        "recurrence": term.cadence,
    }
    if term.cadence is None:
        return out

    cat = resolve_catalog(catalog)
    out["recurrence_formatted"] = recurrence_formatted(term, cat)
    if term.has_fixed_duration():
        out["duration_display"] = term.duration_display()
        out["formatted_duration_with_recurrence"] = term.formatted_duration_with_recurrence(cat)
    return out
