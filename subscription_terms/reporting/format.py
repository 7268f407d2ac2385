from typing import List, Optional, Sequence, Tuple

from ..recurrence import RecurrenceCatalog, resolve_catalog
from ..terms import PriceTerm, formatted_price_with_duration
from ..tiers import SellableUnit
from ..validation import ValidationFailure

TermResult = Tuple[PriceTerm, List[ValidationFailure]]


def _cadence_label(term: PriceTerm, unit: SellableUnit) -> str:
    if term.cadence is None:
        return "one-time"
    if term.is_default_recurrence(unit.default_cadence):
        return f"{term.cadence} (default)"
    return term.cadence


def _charges(term: PriceTerm, catalog: RecurrenceCatalog) -> str:
    count = term.charge_occurrence_count(catalog)
    return "-" if count is None else str(count)


def _status(failures: List[ValidationFailure]) -> str:
    return "✅" if not failures else "⚠️"


def render_terms_table(unit: SellableUnit, results: Sequence[TermResult], catalog: Optional[RecurrenceCatalog] = None) -> str:
    cat = resolve_catalog(catalog)
    rows = [
        "| Cadence | Price | Duration | Charges | Valid? |",
        "|---|---|---|---|---|",
    ]
    for term, failures in results:
        # formatting needs a known cadence; invalid rows show the raw amount instead
        if failures:
            price = "-" if term.amount_minor_units is None else str(term.amount_minor_units)
            duration = term.duration_display()
            charges = "-"
        else:
            price = formatted_price_with_duration(term, symbol=unit.shows_currency_symbol(), catalog=cat)
            duration = term.formatted_duration_with_recurrence(cat)
            charges = _charges(term, cat)
        rows.append(
            "| {cadence} | {price} | {duration} | {charges} | {status} |".format(
                cadence=_cadence_label(term, unit),
                price=price,
                duration=duration,
                charges=charges,
                status=_status(failures),
            )
        )
    return "\n".join(rows)


def render_failures(results: Sequence[TermResult]) -> str:
    rows: List[str] = []
    for term, failures in results:
        for f in failures:
            rows.append(f"- {term.cadence or 'one-time'} / {f.field}: {f.message} ({f.kind})")
    return "\n".join(rows)


def render_report(units: Sequence[Tuple[SellableUnit, Sequence[TermResult]]], catalog: Optional[RecurrenceCatalog] = None) -> str:
    if not units:
        return ""

    sections: List[str] = []
    for unit, results in units:
        sections.append(f"## {unit.owner_display_name()} ({unit.kind})")
        sections.append(render_terms_table(unit, results, catalog))
        problems = render_failures(results)
        if problems:
            sections.append("")
            sections.append("### Problems")
            sections.append(problems)
        sections.append("")

    return "\n".join(sections).strip()
