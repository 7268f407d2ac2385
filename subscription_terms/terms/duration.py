"""Occurrence counts and duration text for a cadence + fixed duration.

Two kinds of text come out of here and they diverge on purpose:

- duration_display() is calendar-accurate: "18 months" is how long the
  commitment lasts.
- formatted_duration_with_recurrence() is billing-accurate: 18 months on a
  yearly cadence is "2 years", because the buyer sees two charges.
"""

from __future__ import annotations

from typing import Optional

from ..config import ONGOING_LABEL
from ..recurrence import RecurrenceCatalog, resolve_catalog


def occurrence_count(
    cadence: Optional[str],
    fixed_duration_months: Optional[int],
    catalog: Optional[RecurrenceCatalog] = None,
) -> Optional[int]:
    if fixed_duration_months is None or not cadence:
        return None

    definition = resolve_catalog(catalog).get(cadence)
    if definition is None:
        return None

    # integer ceiling: a partial final cycle is still billed
    return -(-fixed_duration_months // definition.months_per_cycle)


def duration_display(fixed_duration_months: Optional[int], custom_display_name: Optional[str] = None) -> str:
    if custom_display_name and custom_display_name.strip():
        return custom_display_name
    if fixed_duration_months is not None:
        unit = "month" if fixed_duration_months == 1 else "months"
        return f"{fixed_duration_months} {unit}"
    return ONGOING_LABEL


def formatted_duration_with_recurrence(
    cadence: Optional[str],
    fixed_duration_months: Optional[int],
    custom_display_name: Optional[str] = None,
    catalog: Optional[RecurrenceCatalog] = None,
) -> str:
    if fixed_duration_months is None:
        return duration_display(fixed_duration_months, custom_display_name)

    cat = resolve_catalog(catalog)
    count = occurrence_count(cadence, fixed_duration_months, cat)
    if count is None:
        return duration_display(fixed_duration_months, custom_display_name)

    template = cat.require(cadence).duration_template
    if template is None:
        return duration_display(fixed_duration_months, custom_display_name)
    return template.render(count)
