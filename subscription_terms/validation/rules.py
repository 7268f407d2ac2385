from __future__ import annotations

from typing import Dict, List, Optional

from ..recurrence import RecurrenceCatalog, resolve_catalog
from ..terms import PriceTerm
from .types import (
    BASE_FIELD,
    DURATION_SHORTER_THAN_CYCLE,
    INVALID_CADENCE,
    INVALID_DURATION,
    MISSING_PRICE,
    MISSING_REQUIRED_FIELD,
    PricingContext,
    ValidationFailure,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_required(term: PriceTerm) -> List[ValidationFailure]:
    issues: List[ValidationFailure] = []
    amount = term.amount_minor_units
    if amount is None:
        issues.append(ValidationFailure("amount_minor_units", MISSING_REQUIRED_FIELD, "Price can't be blank"))
    elif not _is_int(amount) or amount < 0:
        issues.append(
            ValidationFailure("amount_minor_units", MISSING_REQUIRED_FIELD, "Price must be a whole number >= 0")
        )
    if not (term.currency or "").strip():
        issues.append(ValidationFailure("currency", MISSING_REQUIRED_FIELD, "Currency can't be blank"))
    return issues


def _check_duration(term: PriceTerm) -> List[ValidationFailure]:
    months = term.fixed_duration_months
    if months is None:
        return []
    if not _is_int(months) or months <= 0:
        return [ValidationFailure("fixed_duration_months", INVALID_DURATION, "must be greater than 0")]
    return []


def _check_cadence(term: PriceTerm, context: PricingContext, catalog: RecurrenceCatalog) -> List[ValidationFailure]:
    if term.cadence is None:
        if context.requires_recurring_billing:
            return [ValidationFailure(BASE_FIELD, INVALID_CADENCE, "Please provide a valid payment option.")]
        return []
    if not catalog.is_allowed(term.cadence):
        return [ValidationFailure(BASE_FIELD, INVALID_CADENCE, "Please provide a valid payment option.")]
    return []


def _check_duration_vs_cycle(term: PriceTerm, catalog: RecurrenceCatalog) -> List[ValidationFailure]:
    months = term.fixed_duration_months
    definition = catalog.get(term.cadence)
    # unknown cadences and bad durations are reported by their own rules
    if definition is None or not _is_int(months) or months <= 0:
        return []
    if months < definition.months_per_cycle:
        return [
            ValidationFailure(
                "fixed_duration_months",
                DURATION_SHORTER_THAN_CYCLE,
                f"must be at least {definition.months_per_cycle} months for {definition.name} billing",
            )
        ]
    return []


def _check_tier_price(term: PriceTerm, context: PricingContext) -> List[ValidationFailure]:
    if context.amount_required_without_cadence and term.amount_minor_units is None:
        return [
            ValidationFailure(BASE_FIELD, MISSING_PRICE, "Please provide a price for all selected payment options.")
        ]
    return []


def validate(
    term: PriceTerm,
    context: Optional[PricingContext] = None,
    catalog: Optional[RecurrenceCatalog] = None,
) -> List[ValidationFailure]:
    """Run every rule and return all failures (empty list means billable)."""

    ctx = context or PricingContext()
    cat = resolve_catalog(catalog)

    issues: List[ValidationFailure] = []
    issues.extend(_check_required(term))
    issues.extend(_check_duration(term))
    issues.extend(_check_cadence(term, ctx, cat))
    issues.extend(_check_duration_vs_cycle(term, cat))
    issues.extend(_check_tier_price(term, ctx))
    return issues


def is_billable(
    term: PriceTerm,
    context: Optional[PricingContext] = None,
    catalog: Optional[RecurrenceCatalog] = None,
) -> bool:
    return not validate(term, context, catalog)


def failures_by_field(failures: List[ValidationFailure]) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for f in failures:
        out.setdefault(f.field, []).append(f.message)
    return out
