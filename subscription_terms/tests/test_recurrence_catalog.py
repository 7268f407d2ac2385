import json
from pathlib import Path

import pytest
import yaml

from subscription_terms.recurrence import (
    RecurrenceCatalog,
    UnknownCadence,
    build_catalog,
    default_catalog,
    load_cadence_definitions,
)


def test_default_table_has_the_five_cadences_in_order(catalog):
    assert catalog.allowed_cadences() == ("monthly", "quarterly", "biannually", "yearly", "every_two_years")


@pytest.mark.parametrize(
    "cadence,months",
    [("monthly", 1), ("quarterly", 3), ("biannually", 6), ("yearly", 12), ("every_two_years", 24)],
)
def test_cycle_months(catalog, cadence, months):
    assert catalog.cycle_months(cadence) == months


def test_every_cadence_has_positive_months_and_indicators(catalog):
    for cadence in catalog.allowed_cadences():
        assert catalog.cycle_months(cadence) > 0
        assert catalog.long_indicator(cadence)
        assert catalog.short_indicator(cadence)
        assert catalog.single_period_indicator(cadence)


def test_monthly_indicators(catalog):
    assert catalog.long_indicator("monthly") == "a month"
    assert catalog.short_indicator("monthly") == "/ month"
    assert catalog.single_period_indicator("monthly") == "1-month"


@pytest.mark.parametrize("lookup", ["cycle_months", "long_indicator", "short_indicator", "single_period_indicator"])
def test_unknown_cadence_fails_loudly(catalog, lookup):
    with pytest.raises(UnknownCadence) as ex:
        getattr(catalog, lookup)("whenever")
    assert ex.value.cadence == "whenever"
    assert isinstance(ex.value, ValueError)


def test_is_allowed_and_get_are_safe_for_odd_input(catalog):
    assert catalog.is_allowed("yearly")
    assert not catalog.is_allowed("Yearly")
    assert not catalog.is_allowed(None)
    assert catalog.get(12) is None


def test_default_catalog_is_built_once():
    assert default_catalog() is default_catalog()


def test_from_definitions_rejects_duplicates(catalog):
    monthly = catalog.require("monthly")
    with pytest.raises(ValueError):
        RecurrenceCatalog.from_definitions([monthly, monthly])


def _write_table(tmp_path: Path, name: str, cadences) -> Path:
    path = tmp_path / name
    if name.endswith(".json"):
        path.write_text(json.dumps({"cadences": cadences}), encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump({"cadences": cadences}), encoding="utf-8")
    return path


def _row(**overrides):
    row = {
        "name": "every_three_years",
        "months_per_cycle": 36,
        "long_indicator": "every 3 years",
        "short_indicator": "/ 3 years",
        "single_period_indicator": "3-year",
    }
    row.update(overrides)
    return row


def test_custom_json_table_without_template(tmp_path: Path):
    path = _write_table(tmp_path, "cadences.json", [_row()])
    cat = build_catalog(path)

    assert cat.allowed_cadences() == ("every_three_years",)
    assert cat.require("every_three_years").duration_template is None
    assert cat.require("every_three_years").source_file == "cadences.json"


@pytest.mark.parametrize(
    "row,message",
    [
        (_row(months_per_cycle=0), "positive"),
        (_row(months_per_cycle="12"), "integer"),
        (_row(months_per_cycle=True), "integer"),
        (_row(short_indicator=""), "cannot be empty"),
        ({"name": "x", "months_per_cycle": 1}, "Missing required key"),
        (_row(duration_template={"one": "a year", "other": "{count} years"}), "{count}"),
    ],
)
def test_invalid_tables_fail_fast(tmp_path: Path, row, message):
    path = _write_table(tmp_path, "bad.yaml", [row])
    with pytest.raises(ValueError) as ex:
        load_cadence_definitions(path)
    assert message in str(ex.value)


def test_duplicate_names_in_table_fail(tmp_path: Path):
    path = _write_table(tmp_path, "dup.yaml", [_row(), _row()])
    with pytest.raises(ValueError, match="Duplicate"):
        load_cadence_definitions(path)


def test_missing_or_empty_table(tmp_path: Path):
    with pytest.raises(ValueError, match="not found"):
        load_cadence_definitions(tmp_path / "nope.yaml")

    empty = tmp_path / "empty.yaml"
    empty.write_text("cadences: []\n", encoding="utf-8")
    with pytest.raises(ValueError, match="non-empty"):
        load_cadence_definitions(empty)
