import pytest

from subscription_terms.terms import PriceTerm, subscription_summary
from subscription_terms.tiers import (
    EDITABLE_FIELDS,
    PRODUCT,
    TIER,
    SellableUnit,
    TierPricing,
    permitted_params,
    price_terms_from_editor_values,
)
from subscription_terms.validation import PricingContext


def _term(**kw):
    base = {"amount_minor_units": 1000, "currency": "usd", "cadence": "monthly"}
    base.update(kw)
    return PriceTerm(**base)


def test_values_by_cadence_for_display():
    pricing = TierPricing([_term(fixed_duration_months=12, duration_display_name="1 year deal")])

    values = pricing.values_by_cadence(for_edit=False)

    assert values["monthly"]["fixed_duration_months"] == 12
    assert values["monthly"]["duration_display"] == "1 year deal"
    assert values["monthly"]["price_cents"] == 1000
    assert values["monthly"]["price"] == "10"
    assert "duration_display_name" not in values["monthly"]


def test_values_by_cadence_for_edit_includes_raw_override():
    pricing = TierPricing([_term(amount_minor_units=2000, fixed_duration_months=24, duration_display_name="2 year deal")])

    entry = pricing.values_by_cadence(for_edit=True)["monthly"]

    assert entry["fixed_duration_months"] == 24
    assert entry["duration_display_name"] == "2 year deal"
    assert entry["duration_display"] == "2 year deal"


def test_ongoing_terms_have_no_duration_keys():
    entry = TierPricing([_term()]).values_by_cadence(for_edit=False)["monthly"]

    assert "fixed_duration_months" not in entry
    assert "duration_display" not in entry


def test_values_follow_catalog_order_and_skip_one_time_terms():
    pricing = TierPricing([_term(cadence="yearly"), _term(cadence=None), _term(cadence="monthly")])

    assert list(pricing.values_by_cadence()) == ["monthly", "yearly"]


def test_suggested_price_is_carried_through():
    entry = TierPricing([_term(suggested_amount_minor_units=2500)]).values_by_cadence()["monthly"]

    assert entry["suggested_price_cents"] == 2500
    assert entry["suggested_price"] == "25"


def test_one_term_per_cadence():
    with pytest.raises(ValueError, match="Duplicate"):
        TierPricing([_term(), _term(amount_minor_units=5)])
    with pytest.raises(ValueError):
        TierPricing([_term(cadence=None), _term(cadence=None)])


def test_has_fixed_duration_pricing():
    assert TierPricing([_term(fixed_duration_months=12)]).has_fixed_duration_pricing()
    assert not TierPricing([_term()]).has_fixed_duration_pricing()
    assert not TierPricing([]).has_fixed_duration_pricing()


def test_single_cadence_lookups():
    pricing = TierPricing(
        [_term(fixed_duration_months=18, duration_display_name="Special 18-month offer"), _term(cadence="yearly")]
    )

    assert pricing.duration_for_cadence("monthly") == 18
    assert pricing.duration_display_for_cadence("monthly") == "Special 18-month offer"
    assert pricing.duration_for_cadence("yearly") is None
    assert pricing.duration_display_for_cadence("yearly") == "Ongoing"
    assert pricing.duration_for_cadence("quarterly") is None
    assert pricing.duration_display_for_cadence("quarterly") == "Ongoing"


def test_sellable_unit_placeholders_and_contexts():
    assert SellableUnit(kind=PRODUCT).owner_display_name() == "Product"
    assert SellableUnit(kind=TIER).owner_display_name() == "Tier"
    assert SellableUnit(kind=TIER, name="Premium").owner_display_name() == "Premium"

    assert SellableUnit(kind=TIER).pricing_context() == PricingContext.for_tier()
    assert SellableUnit(kind=PRODUCT, is_recurring_billing=True).pricing_context() == PricingContext(
        requires_recurring_billing=True
    )
    with pytest.raises(ValueError):
        SellableUnit(kind="bundle")


def test_tier_summaries_drop_the_currency_symbol(catalog):
    term = _term(amount_minor_units=2999, fixed_duration_months=24)

    for unit, expected in [
        (SellableUnit(kind=TIER, name="Premium"), "Premium - 29.99 / month for 24 months"),
        (SellableUnit(kind=PRODUCT, name="Premium"), "Premium - $29.99 / month for 24 months"),
    ]:
        summary = subscription_summary(
            term, unit.owner_display_name(), symbol=unit.shows_currency_symbol(), catalog=catalog
        )
        assert summary == expected


def test_permitted_params_cover_every_cadence(catalog):
    params = permitted_params(catalog)

    assert set(params) == set(catalog.allowed_cadences())
    for fields in params.values():
        assert "fixed_duration_months" in fields
        assert "duration_display_name" in fields
        assert {"enabled", "price", "price_cents", "suggested_price", "suggested_price_cents"} <= set(fields)
    assert params["monthly"] == EDITABLE_FIELDS


def test_editor_values_become_price_terms(catalog):
    terms = price_terms_from_editor_values(
        {
            "monthly": {
                "enabled": "1",
                "price_cents": "1000",
                "fixed_duration_months": "12",
                "duration_display_name": "1 year deal",
            },
            "yearly": {"enabled": "1", "price": "99.50", "fixed_duration_months": "", "duration_display_name": ""},
            "quarterly": {"enabled": "0", "price_cents": "3000"},
            "whenever": {"enabled": "1", "price_cents": "1"},
        },
        currency="usd",
        catalog=catalog,
    )

    assert terms == [
        PriceTerm(1000, "usd", "monthly", fixed_duration_months=12, duration_display_name="1 year deal"),
        PriceTerm(9950, "usd", "yearly"),
    ]


def test_editor_round_trip(catalog):
    original = [
        _term(fixed_duration_months=12, duration_display_name="Annual deal", suggested_amount_minor_units=1500),
        _term(cadence="yearly", amount_minor_units=9900),
    ]

    edited = TierPricing(original, catalog).values_by_cadence(for_edit=True)

    assert price_terms_from_editor_values(edited, currency="usd", catalog=catalog) == original


def test_editor_rejects_non_numeric_input(catalog):
    with pytest.raises(ValueError, match="monthly.fixed_duration_months"):
        price_terms_from_editor_values({"monthly": {"price_cents": "100", "fixed_duration_months": "a year"}}, catalog=catalog)
    with pytest.raises(ValueError, match="monthly.price"):
        price_terms_from_editor_values({"monthly": {"price": "ten"}}, catalog=catalog)
