import math

import pytest

from subscription_terms.recurrence import RecurrenceCatalog
from subscription_terms.recurrence.types import CadenceDefinition
from subscription_terms.terms import duration_display, formatted_duration_with_recurrence, occurrence_count


def test_occurrence_count_rounds_partial_cycles_up(catalog):
    # 18 months on a yearly plan is billed twice
    assert occurrence_count("yearly", 18, catalog) == 2
    assert occurrence_count("yearly", 24, catalog) == 2
    assert occurrence_count("quarterly", 10, catalog) == 4
    assert occurrence_count("monthly", 18, catalog) == 18


def test_occurrence_count_never_undercounts(catalog):
    for cadence in catalog.allowed_cadences():
        cycle = catalog.cycle_months(cadence)
        for months in range(1, 61):
            count = occurrence_count(cadence, months, catalog)
            assert count == math.ceil(months / cycle)
            assert count * cycle >= months


@pytest.mark.parametrize(
    "cadence,months",
    [(None, 12), ("monthly", None), (None, None), ("whenever", 12), ("", 12)],
)
def test_occurrence_count_absent(catalog, cadence, months):
    assert occurrence_count(cadence, months, catalog) is None


def test_duration_display():
    assert duration_display(12) == "12 months"
    assert duration_display(1) == "1 month"
    assert duration_display(None) == "Ongoing"
    assert duration_display(None, "") == "Ongoing"
    assert duration_display(6, "   ") == "6 months"
    assert duration_display(12, "1 year special") == "1 year special"
    assert duration_display(None, "Lifetime") == "Lifetime"


def test_duration_display_is_pure():
    assert duration_display(18, None) == duration_display(18, None)


@pytest.mark.parametrize(
    "cadence,months,expected",
    [
        ("monthly", 12, "12 months"),
        ("monthly", 1, "1 month"),
        ("quarterly", 3, "1 quarter"),
        ("quarterly", 12, "4 quarters"),
        ("biannually", 6, "1 payment (6 months each)"),
        ("biannually", 18, "3 payments (6 months each)"),
        ("yearly", 12, "1 year"),
        ("yearly", 24, "2 years"),
        ("yearly", 18, "2 years"),
        ("every_two_years", 24, "1 payment (2 years each)"),
        ("every_two_years", 48, "2 payments (2 years each)"),
    ],
)
def test_formatted_duration_with_recurrence(catalog, cadence, months, expected):
    assert formatted_duration_with_recurrence(cadence, months, None, catalog) == expected


def test_formatted_duration_prefers_occurrences_over_custom_name(catalog):
    assert formatted_duration_with_recurrence("monthly", 12, "1 year deal", catalog) == "12 months"
    assert formatted_duration_with_recurrence("yearly", 24, "2 year special", catalog) == "2 years"


def test_formatted_duration_falls_back_to_duration_display(catalog):
    assert formatted_duration_with_recurrence("monthly", None, None, catalog) == "Ongoing"
    assert formatted_duration_with_recurrence("monthly", None, "Forever", catalog) == "Forever"
    # no cadence: nothing to count
    assert formatted_duration_with_recurrence(None, 12, "Annual plan", catalog) == "Annual plan"
    assert formatted_duration_with_recurrence(None, 12, None, catalog) == "12 months"
    assert formatted_duration_with_recurrence("whenever", 12, None, catalog) == "12 months"


def test_recognized_cadence_without_template_falls_back():
    cat = RecurrenceCatalog.from_definitions(
        [
            CadenceDefinition(
                name="every_three_years",
                months_per_cycle=36,
                long_indicator="every 3 years",
                short_indicator="/ 3 years",
                single_period_indicator="3-year",
            )
        ]
    )
    assert occurrence_count("every_three_years", 72, cat) == 2
    assert formatted_duration_with_recurrence("every_three_years", 72, None, cat) == "72 months"
